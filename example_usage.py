#!/usr/bin/env python3
"""
Basic usage examples for the DNS Made Easy client library.

Runs against the DNSME sandbox. Set DNSME_API_KEY and DNSME_SECRET_KEY to
sandbox credentials before running.
"""

import logging
import os
import sys

from dnsme_client import (
    DNSMEClient,
    DNSMEClientError,
    DNSME_SANDBOX_API_URL,
    Domain,
    NotFoundError,
    Record
)


def main():
    """Run basic usage examples."""

    # Cooldown warnings go to stderr through logging
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    api_key = os.environ.get("DNSME_API_KEY")
    secret_key = os.environ.get("DNSME_SECRET_KEY")
    if not api_key or not secret_key:
        print("DNSME_API_KEY and DNSME_SECRET_KEY must be set")
        return 1

    domain_name = "python-client-demo.com"

    print("=== DNS Made Easy Client Basic Usage Examples ===\n")

    with DNSMEClient(api_key, secret_key, DNSME_SANDBOX_API_URL) as client:
        try:
            # Example 1: List domains
            print("1. Listing domains...")
            domains = client.get_domain_list()
            for name in domains.names:
                print(f"   - {name}")
            print(f"   Requests remaining: {client.requests_remaining}\n")

            # Example 2: Create the demo domain if needed
            print(f"2. Looking up {domain_name}...")
            try:
                info = client.get_domain_info(domain_name)
                print(f"   ✓ Exists, name servers: {', '.join(info.name_servers)}")
            except NotFoundError:
                info = client.add_domain(Domain(domain_name))
                print(f"   ✓ Created {info.name}")
            print()

            # Example 3: Add a record
            print("3. Adding an A record...")
            record = client.add_domain_record(domain_name, Record("www", "A", "192.0.2.10", ttl=1800))
            print(f"   ✓ Record id {record.id}: {record.name} {record.type} {record.data}\n")

            # Example 4: Update it
            print("4. Updating the record...")
            record.data = "192.0.2.20"
            client.add_domain_record(domain_name, record)
            updated = client.get_domain_record(domain_name, record.id)
            print(f"   ✓ Now points to {updated.data}\n")

            # Example 5: List A records only
            print("5. Listing A records...")
            for rec in client.get_domain_records(domain_name, {"type": "A"}):
                print(f"   - {rec.id}: {rec.name} -> {rec.data} (ttl {rec.ttl})")
            print()

            # Example 6: Clean up
            print("6. Deleting the record...")
            client.delete_domain_record(domain_name, record.id)
            print("   ✓ Deleted\n")

        except DNSMEClientError as e:
            print(f"   ✗ {type(e).__name__}: {e}")
            return 1

    print("=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
