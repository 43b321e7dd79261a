"""
SQLAlchemy column type for ULIDs.

Application code sees ULID text; the database stores the 16 raw bytes,
either in a native UUID column or in a fixed-size binary column.

Example:
    class Event(Model):
      __tablename__ = "events"

      id = ulid_column()
      parent_id = Column(ULIDType(storage="binary"), nullable=True)
"""

import uuid
from typing import Any, Optional

from sqlalchemy import Column, LargeBinary, Uuid
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine

from .config.constants import STORAGE_BINARY, STORAGE_FORMATS, ULID_RAW_LENGTH
from .config.env import EnvConfig
from .exceptions import ULIDCastError
from .logger import log_error, types_logger
from .ulid import autogenerate, dump, load


class RawULID(LargeBinary):
  """Fixed-size binary column whose SQL literals are hex, not decoded text."""

  def literal_processor(self, dialect: Dialect):
    if dialect.name == "postgresql":

      def process(value: bytes) -> str:
        return f"'\\x{value.hex()}'::BYTEA"

    else:

      def process(value: bytes) -> str:
        return f"X'{value.hex()}'"

    return process


class ULIDType(TypeDecorator):
  """
  ULID column stored as a UUID or as 16 raw bytes.

  Args:
      storage: "uuid" or "binary"; defaults to EnvConfig.ULID_STORAGE
  """

  impl = Uuid
  cache_ok = True

  def __init__(self, storage: Optional[str] = None, *args, **kwargs):
    storage = (storage or EnvConfig.ULID_STORAGE).lower()
    if storage not in STORAGE_FORMATS:
      raise ValueError(
        f"Unsupported ULID storage {storage!r}, expected one of {STORAGE_FORMATS}"
      )
    self.storage = storage
    super().__init__(*args, **kwargs)

  def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
    if self.storage == STORAGE_BINARY:
      return dialect.type_descriptor(RawULID(ULID_RAW_LENGTH))
    return dialect.type_descriptor(Uuid(as_uuid=True))

  @property
  def python_type(self) -> type:
    return str

  def _dump(self, value: Any) -> bytes:
    raw = dump(value)
    if raw is None:
      error = ULIDCastError(value, "ULID")
      log_error(
        types_logger,
        error,
        "types",
        "process_bind_param",
        metadata={"storage": self.storage, **error.details},
      )
      raise error
    return raw

  def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
    if value is None:
      return None
    raw = self._dump(value)
    if self.storage == STORAGE_BINARY:
      return raw
    return uuid.UUID(bytes=raw)

  def process_literal_param(self, value: Any, dialect: Dialect) -> Any:
    # The impl type's literal processor quotes the returned value
    return self.process_bind_param(value, dialect)

  def process_result_value(self, value: Any, dialect: Dialect) -> Optional[str]:
    if value is None:
      return None
    loaded = load(_normalize_raw(value))
    if loaded is None:
      error = ULIDCastError(value, "ULID")
      log_error(
        types_logger,
        error,
        "types",
        "process_result_value",
        error_category="data_integrity",
        metadata={"storage": self.storage, **error.details},
      )
      raise error
    return loaded

  def compare_values(self, x: Any, y: Any) -> bool:
    return _comparable(x) == _comparable(y)


def _comparable(value: Any) -> Any:
  """Raw bytes for ULID or UUID text so both forms compare equal."""
  raw = dump(value)
  return value if raw is None else raw


def _normalize_raw(value: Any) -> Any:
  """Coerce driver result values to raw bytes."""
  if isinstance(value, uuid.UUID):
    return value.bytes
  if isinstance(value, (bytearray, memoryview)):
    return bytes(value)
  if isinstance(value, str):
    # Drivers without a native UUID type hand back hex text
    try:
      return uuid.UUID(value).bytes
    except ValueError:
      return value
  return value


def ulid_column(
  name: Optional[str] = None,
  *args,
  primary_key: bool = True,
  storage: Optional[str] = None,
  **kwargs,
) -> Column:
  """
  Return a ULID column that fills itself with a fresh ULID.

  Args:
      name: Optional column name
      *args: Extra positional Column arguments (ForeignKey, constraints)
      primary_key: Whether the column is the primary key
      storage: Storage format passed to ULIDType
      **kwargs: Extra Column keyword arguments

  Returns:
      A Column using ULIDType with autogenerate as default
  """
  kwargs.setdefault("default", autogenerate)
  kwargs.setdefault("nullable", not primary_key)
  leading = (name,) if name is not None else ()
  return Column(
    *leading, ULIDType(storage=storage), *args, primary_key=primary_key, **kwargs
  )
