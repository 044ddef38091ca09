"""SRC44 descriptor extraction.

SRC44 is a small JSON descriptor that Signum users embed in free-text ledger fields
(transaction messages, account and token descriptions, alias URIs). A field carries a
descriptor when it holds a JSON object whose "vs" (version) member is the integer 1;
all other members are passed through untouched.

Free-text fields are user controlled and rarely carry a descriptor, so extraction is a
lookup rather than a validation step: anything that is not a descriptor yields None.
"""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError, field_validator

SRC44_VERSION = 1


class Src44Descriptor(BaseModel):
    model_config = ConfigDict(extra="allow")

    # StrictInt keeps true and 1.0 out, both compare equal to 1
    vs: StrictInt

    @field_validator("vs")
    @classmethod
    def check_version(cls, value: int) -> int:
        if value != SRC44_VERSION:
            raise ValueError(f"unsupported SRC44 version {value}")
        return value


def extract_descriptor(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """Return the SRC44 descriptor carried by `text`, or None when there is none."""
    if not text:
        return None
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        # Deeply nested input exhausts the decoder's recursion limit
        return None
    if not isinstance(data, dict):
        return None
    try:
        Src44Descriptor.model_validate(data, strict=True)
    except ValidationError:
        return None
    return data
