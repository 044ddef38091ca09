"""did:signum identifier, document and resolution result models.

Pydantic models for the W3C DID Core and DID Resolution data structures as produced by
this resolver. Field names are snake_case in Python and serialize to the camelCase
names used by the W3C vocabulary.
"""

from enum import StrEnum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

DID_METHOD = "signum"

DID_CORE_CONTEXT = "https://www.w3.org/ns/did/v1"
ED25519_2020_CONTEXT = "https://w3id.org/security/suites/ed25519-2020/v1"
VERIFICATION_METHOD_TYPE = "Ed25519VerificationKey2020"

DID_LD_JSON = "application/did+ld+json"
DID_JSON = "application/did+json"
JSON = "application/json"


class Network(StrEnum):
    """Signum networks a DID can be scoped to."""

    mainnet = "mainnet"
    testnet = "testnet"


class DidType(StrEnum):
    """Ledger entity types addressable by a did:signum identifier."""

    tx = "tx"
    acc = "acc"
    alias = "alias"
    contract = "contract"
    token = "token"


class ResolutionError(StrEnum):
    """DID Resolution error codes.

    See https://w3c.github.io/did-resolution/#errors
    """

    invalid_did = "invalidDid"
    not_found = "notFound"
    representation_not_supported = "representationNotSupported"
    method_not_supported = "methodNotSupported"
    invalid_did_document = "invalidDidDocument"
    internal_error = "internalError"


class W3CModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ParsedDid(BaseModel):
    """Decomposed did:signum identifier.

    Created once per resolution request by the parser and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    did: str
    method: str = DID_METHOD
    network: Network = Network.mainnet
    type: DidType
    identifier: str


class VerificationMethod(W3CModel):
    id: str
    type: str = VERIFICATION_METHOD_TYPE
    controller: str
    public_key_multibase: Optional[str] = None
    public_key_base58: Optional[str] = None


class Service(W3CModel):
    id: str
    type: str
    service_endpoint: Union[str, Dict[str, Any]]


class DidDocument(W3CModel):
    """W3C DID Document.

    See https://www.w3.org/TR/did-core/#did-document-properties

    Unknown members are kept so documents stay extensible; `src44` carries the
    Signum-specific structured descriptor when one was found on the ledger.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    context: List[str] = Field(
        default_factory=lambda: [DID_CORE_CONTEXT], alias="@context"
    )
    id: str
    controller: Optional[Union[str, List[str]]] = None
    verification_method: Optional[List[VerificationMethod]] = None
    authentication: Optional[List[Union[str, VerificationMethod]]] = None
    assertion_method: Optional[List[Union[str, VerificationMethod]]] = None
    service: Optional[List[Service]] = None
    also_known_as: Optional[List[str]] = None
    src44: Optional[Dict[str, Any]] = None


class DidDocumentMetadata(W3CModel):
    """DID Document Metadata.

    See https://w3c.github.io/did-resolution/#did-document-metadata

    `block_height` and `confirmations` are Signum-specific. `immutable` is a function
    of the entity type only; it is left unset on error results.
    """

    created: Optional[str] = None
    updated: Optional[str] = None
    deactivated: Optional[bool] = None
    block_height: Optional[int] = None
    confirmations: Optional[int] = None
    immutable: Optional[bool] = None


class DidResolutionMetadata(W3CModel):
    content_type: Optional[str] = None
    error: Optional[ResolutionError] = None
    message: Optional[str] = None


class ResolutionResult(W3CModel):
    """DID Resolution Result.

    See https://w3c.github.io/did-resolution/#did-resolution-result

    Exactly one of `did_document` and `did_resolution_metadata.error` is populated.
    """

    did_resolution_metadata: DidResolutionMetadata
    did_document: Optional[DidDocument] = None
    did_document_metadata: DidDocumentMetadata = Field(
        default_factory=DidDocumentMetadata
    )

    @model_validator(mode="after")
    def check_document_or_error(self) -> "ResolutionResult":
        has_error = self.did_resolution_metadata.error is not None
        has_document = self.did_document is not None
        if has_error == has_document:
            raise ValueError(
                "a resolution result carries either a DID document or an error"
            )
        return self

    @classmethod
    def resolved(
        cls, document: DidDocument, metadata: DidDocumentMetadata
    ) -> "ResolutionResult":
        return cls(
            did_resolution_metadata=DidResolutionMetadata(content_type=DID_LD_JSON),
            did_document=document,
            did_document_metadata=metadata,
        )

    @classmethod
    def failed(cls, error: ResolutionError, message: str) -> "ResolutionResult":
        return cls(
            did_resolution_metadata=DidResolutionMetadata(error=error, message=message),
            did_document=None,
            did_document_metadata=DidDocumentMetadata(),
        )

    @property
    def error(self) -> Optional[ResolutionError]:
        return self.did_resolution_metadata.error

    def to_dict(self) -> Dict[str, Any]:
        # didDocument is always present on the wire, as null on failures
        return {
            "didResolutionMetadata": self.did_resolution_metadata.to_dict(),
            "didDocument": (
                self.did_document.to_dict() if self.did_document is not None else None
            ),
            "didDocumentMetadata": self.did_document_metadata.to_dict(),
        }
