"""
DID Resolution

This package implements resolution of did:signum identifiers to W3C DID Documents.

Key Components:
- parser.py: Identifier grammar, parsing, validation and canonical DID construction
- descriptor.py: Best-effort SRC44 descriptor extraction from free-text fields
- builders.py: One DID Document builder per ledger entity type
- resolver.py: The resolution state machine tying parser, ledger and builders together
- __main__.py: CLI interface for resolution

Identifier Types:
1. tx - a transaction, immutable, controlled by its sender
2. acc - an account, by numeric id or S-XXXX-XXXX-XXXX-XXXXX address
3. alias - an alias, by numeric id or [tld:]name
4. contract - a smart contract (AT), controlled by its creator
5. token - a token (asset), immutable, controlled by its issuer

Every resolution yields either a DID Document or one of the DID Resolution error
codes (invalidDid, notFound, internalError), never an exception.
"""
