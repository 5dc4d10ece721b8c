"""
Typed structures for DNSME JSON payloads.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import APIError


class ErrorsMixin:
    """Shared handling of the ``error`` list DNSME embeds in bodies."""

    error: List[str]

    def raise_for_errors(self):
        """Raise APIError if the provider reported any errors."""
        if self.error:
            raise APIError(self.error)


@dataclass
class DomainList(ErrorsMixin):
    names: List[str] = field(default_factory=list)
    error: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DomainList':
        return cls(
            names=list(data.get('list') or []),
            error=list(data.get('error') or [])
        )

    def to_dict(self) -> Dict[str, Any]:
        body = {'list': list(self.names)}
        if self.error:
            body['error'] = list(self.error)
        return body


@dataclass
class Domain(ErrorsMixin):
    name: str
    name_servers: List[str] = field(default_factory=list)
    vanity_name_servers: List[str] = field(default_factory=list)
    gtd_enabled: bool = False
    error: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Domain':
        return cls(
            name=data.get('name', ''),
            name_servers=list(data.get('nameServer') or []),
            vanity_name_servers=list(data.get('vanityNameServers') or []),
            gtd_enabled=bool(data.get('gtdEnabled', False)),
            error=list(data.get('error') or [])
        )

    def to_dict(self) -> Dict[str, Any]:
        body = {
            'name': self.name,
            'nameServer': list(self.name_servers),
            'vanityNameServers': list(self.vanity_name_servers),
            'gtdEnabled': self.gtd_enabled
        }
        if self.error:
            body['error'] = list(self.error)
        return body


@dataclass
class Record(ErrorsMixin):
    name: str
    type: str
    data: str = ''
    id: Optional[int] = None
    gtd_location: str = 'DEFAULT'
    ttl: int = 86400
    password: str = ''
    error: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], domain: Optional[str] = None) -> 'Record':
        """
        Build a record from a DNSME response body.

        Args:
            data: Decoded JSON object
            domain: Domain the record belongs to; when given, a CNAME with
                empty data is filled in with ``"<domain>."``

        Returns:
            Record instance
        """
        record = cls(
            name=data.get('name', ''),
            type=data.get('type', ''),
            data=data.get('data') or '',
            id=data.get('id'),
            gtd_location=data.get('gtdLocation', 'DEFAULT'),
            ttl=data.get('ttl', 86400),
            password=data.get('password') or '',
            error=list(data.get('error') or [])
        )
        if domain is not None:
            record.fill_cname_data(domain)
        return record

    def fill_cname_data(self, domain: str):
        # DNSME may return CNAMEs without data, but rejects them on add/update
        if self.type == 'CNAME' and not self.data:
            self.data = domain + '.'

    def to_dict(self) -> Dict[str, Any]:
        body = {
            'name': self.name,
            'type': self.type,
            'data': self.data,
            'gtdLocation': self.gtd_location,
            'ttl': self.ttl,
            'password': self.password
        }
        if self.id:
            body['id'] = self.id
        if self.error:
            body['error'] = list(self.error)
        return body
