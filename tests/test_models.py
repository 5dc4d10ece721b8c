"""
Unit tests for DNSME payload models.
"""

import pytest

from dnsme_client import APIError, Domain, DomainList, Record


class TestDomain:

    def test_from_dict(self):
        domain = Domain.from_dict({
            "name": "example.com",
            "nameServer": ["ns1.dnsmadeeasy.com", "ns2.dnsmadeeasy.com"],
            "vanityNameServers": [],
            "gtdEnabled": True
        })

        assert domain.name == "example.com"
        assert domain.name_servers == ["ns1.dnsmadeeasy.com", "ns2.dnsmadeeasy.com"]
        assert domain.gtd_enabled is True
        assert domain.error == []

    def test_to_dict_omits_empty_error(self):
        body = Domain("example.com").to_dict()

        assert body == {
            "name": "example.com",
            "nameServer": [],
            "vanityNameServers": [],
            "gtdEnabled": False
        }

    def test_raise_for_errors(self):
        domain = Domain.from_dict({"error": ["Domain", "already exists."]})

        with pytest.raises(APIError) as exc_info:
            domain.raise_for_errors()

        assert str(exc_info.value) == "Domain already exists."
        assert exc_info.value.errors == ["Domain", "already exists."]

    def test_no_errors(self):
        Domain("example.com").raise_for_errors()  # Should not raise


class TestRecord:

    def test_from_dict(self):
        record = Record.from_dict({
            "name": "www",
            "id": 1234,
            "type": "A",
            "data": "10.0.0.1",
            "gtdLocation": "DEFAULT",
            "ttl": 1800
        })

        assert record.id == 1234
        assert record.data == "10.0.0.1"
        assert record.ttl == 1800
        assert record.password == ""

    def test_cname_without_data_filled(self):
        record = Record.from_dict({"name": "alias", "type": "CNAME", "data": ""}, "example.com")

        assert record.data == "example.com."

    def test_cname_with_data_untouched(self):
        record = Record.from_dict({"name": "alias", "type": "CNAME", "data": "www"}, "example.com")

        assert record.data == "www"

    def test_cname_left_alone_without_domain(self):
        record = Record.from_dict({"name": "alias", "type": "CNAME", "data": ""})

        assert record.data == ""

    def test_other_types_not_filled(self):
        record = Record.from_dict({"name": "", "type": "TXT", "data": ""}, "example.com")

        assert record.data == ""

    def test_to_dict_new_record_has_no_id(self):
        body = Record("www", "A", "10.0.0.1").to_dict()

        assert "id" not in body
        assert "error" not in body
        assert body["gtdLocation"] == "DEFAULT"
        assert body["ttl"] == 86400

    def test_to_dict_existing_record(self):
        body = Record("www", "A", "10.0.0.1", id=99).to_dict()

        assert body["id"] == 99


class TestDomainList:

    def test_from_dict(self):
        assert DomainList.from_dict({"list": ["a.com", "b.org"]}).names == ["a.com", "b.org"]

    def test_empty(self):
        domains = DomainList.from_dict({})

        assert domains.names == []
        domains.raise_for_errors()  # Should not raise

    def test_raise_for_errors(self):
        domains = DomainList.from_dict({"error": ["Rate", "limited."]})

        with pytest.raises(APIError) as exc_info:
            domains.raise_for_errors()

        assert str(exc_info.value) == "Rate limited."
        assert domains.to_dict() == {"list": [], "error": ["Rate", "limited."]}
