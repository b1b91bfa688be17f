# db.py
import logging
import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Protocol

from dotenv import load_dotenv
from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlmodel import create_engine

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "").strip()
if not DATABASE_URL:
  raise RuntimeError("DATABASE_URL is not set in backend .env")

engine = create_engine(DATABASE_URL, echo=False, pool_pre_ping=True)


class SeedClient(Protocol):
  """What the seeder needs from a connection: run a statement, then close."""

  def execute(self, statement: str, params: Optional[Dict[str, Any]] = None) -> int: ...

  def close(self) -> None: ...


class SqlClient:
  """SeedClient over a single SQLAlchemy connection.

  The connection runs in AUTOCOMMIT, so every statement is durable on its own
  and a failure part-way through leaves the earlier tables in place.
  """

  def __init__(self, conn: Connection):
    self._conn = conn

  def execute(self, statement: str, params: Optional[Dict[str, Any]] = None) -> int:
    result = self._conn.execute(text(statement), params or {})
    return max(result.rowcount, 0)

  def close(self) -> None:
    self._conn.close()


@contextmanager
def connect() -> Iterator[SeedClient]:
  conn = engine.connect().execution_options(isolation_level="AUTOCOMMIT")
  client = SqlClient(conn)
  logger.debug("Opened seed connection")
  try:
    yield client
  finally:
    client.close()
    logger.debug("Closed seed connection")
