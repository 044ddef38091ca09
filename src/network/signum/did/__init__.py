"""
Signum DID Resolver

This module implements a resolver for the did:signum method. It turns identifiers that
point at entities on the Signum ledger (transactions, accounts, aliases, smart contracts
and tokens) into W3C DID Documents, and exposes that resolution over the DID Resolution
HTTP(S) binding.

Key Components:
- app: Web application layer with request handlers and server configuration
- ledger: Asynchronous client for Signum node HTTP APIs and its typed records
- model: Value objects for parsed DIDs, entity data, DID documents and resolution results
- resolve: Identifier parsing, SRC44 descriptor extraction, document builders and the resolver

Architecture Overview:
1. Parsing:
   - did:signum:[network:]<type>:<identifier> is validated and decomposed
   - The network segment is optional and defaults to mainnet

2. Fetching:
   - The entity behind the identifier is read from a Signum node
   - Free-text fields are scanned for an embedded SRC44 descriptor

3. Building:
   - A type-specific DID Document and document metadata are assembled
   - Failures are reported as invalidDid, notFound or internalError results
"""
