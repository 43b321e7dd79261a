import os

# Quieter logging for test runs; must be set before ulidtype is imported
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

# Reference vector shared by the codec tests
RAW = bytes(
  [1, 95, 194, 60, 108, 73, 209, 114, 136, 236, 133, 115, 106, 195, 145, 22]
)
ENCODED = "01BZ13RV29T5S8HV45EDNC748P"
ENCODED_UUID = "015fc23c-6c49-d172-88ec-85736ac39116"

# Vector from the ULID README seed-time example
TIMESTAMP = 1_469_918_176_385
TIMESTAMP_ULID = "01ARYZ6S4124TJP2BQQZX06FKM"
TIMESTAMP_RAW = bytes(
  [1, 86, 61, 243, 100, 129, 149, 125, 206, 44, 55, 150, 198, 186, 71, 79]
)
TIMESTAMP_UUID = "01563df3-6481-957d-ce2c-3796c6ba474f"

ZERO_RAW = bytes(16)
ZERO_ENCODED = "0" * 26


@pytest.fixture
def engine():
  """In-memory SQLite engine."""
  engine = create_engine("sqlite:///:memory:")
  yield engine
  engine.dispose()


@pytest.fixture
def db_session(engine):
  """Session bound to the in-memory engine."""
  SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
  session = SessionLocal()
  try:
    yield session
  finally:
    session.close()
