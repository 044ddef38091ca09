"""
Resolver Data Models

This package contains the value objects that flow through a single resolution call.
All of them are request scoped: they are created while resolving one DID and discarded
once the resolution result has been serialized.

Key Components:
- did.py: Parsed identifiers, DID documents, metadata and resolution results
- entities.py: Per-type ledger data handed to the document builders
- health.py: Failure gauge backing the readiness check

Serialization follows the W3C vocabulary: fields are snake_case in Python and camelCase
on the wire, with absent optional members omitted rather than emitted as null.
"""
