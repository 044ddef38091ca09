"""
Signum Ledger Integration

This package provides read access to the Signum ledger for the resolver.

Key Components:
- client.py: LedgerClient protocol and the aiohttp-based SignumLedgerClient
- records.py: Pydantic records for node API responses
- errors.py: LedgerError and the named "unknown entity" predicates
- chain_time.py: Conversion of chain timestamps to wall-clock time

The resolver depends only on the LedgerClient protocol, so tests and alternative
transports can substitute their own implementation.
"""
