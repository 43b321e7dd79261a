"""Pydantic types for ULID values in request and response models."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from .ulid import cast, extract_datetime, extract_timestamp, to_uuid


def _validate_ulid(value: str) -> str:
  """Normalize ULID or UUID text to ULID text."""
  result = cast(value)
  if result is None:
    raise ValueError(
      "Value must be a 26-character Crockford Base32 ULID or a 36-character UUID"
    )
  return result


ULIDStr = Annotated[
  str,
  AfterValidator(_validate_ulid),
  Field(
    description="ULID in Crockford Base32 form (UUID hex input is accepted)",
    examples=["01BZ13RV29T5S8HV45EDNC748P"],
  ),
]


class ULIDInfo(BaseModel):
  """All representations of a single ULID."""

  ulid: ULIDStr
  uuid: str = Field(
    ...,
    min_length=36,
    max_length=36,
    description="Same 128 bits as lowercase 8-4-4-4-12 hex",
    examples=["015fc23c-6c49-d172-88ec-85736ac39116"],
  )
  timestamp_ms: int = Field(
    ..., ge=0, description="Unix timestamp in milliseconds", examples=[1469918176385]
  )
  created_at: datetime = Field(..., description="Timestamp as UTC datetime")

  @classmethod
  def from_value(cls, value: str) -> "ULIDInfo":
    """
    Build a ULIDInfo from ULID or UUID text.

    Raises:
        ValueError: if the value is not a ULID
    """
    text = _validate_ulid(value)
    return cls(
      ulid=text,
      uuid=to_uuid(text),
      timestamp_ms=extract_timestamp(text),
      created_at=extract_datetime(text),
    )
