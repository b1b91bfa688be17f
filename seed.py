# seed.py
"""Create the dashboard tables and load the placeholder dataset into them.

Tables are seeded one after another on a single connection, in the order
users, customers, invoices, revenue; invoices point at customer ids, so
customers have to be in place first. Every insert skips rows that already
exist, which makes a second run a no-op.
"""
import logging
from typing import Any, Dict, Iterable, Iterator, List, Sequence, Tuple

import placeholder_data
from db import SeedClient, connect
from models import Customer, Invoice, Revenue, SeedReport, User
from security import hash_password

logger = logging.getLogger(__name__)

Statement = Tuple[str, Dict[str, Any]]

CREATE_UUID_EXTENSION = 'CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'

CREATE_USERS = """
  CREATE TABLE IF NOT EXISTS users (
    id UUID DEFAULT uuid_generate_v4() PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    email TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL
  );
"""

CREATE_CUSTOMERS = """
  CREATE TABLE IF NOT EXISTS customers (
    id UUID DEFAULT uuid_generate_v4() PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    email VARCHAR(255) NOT NULL,
    image_url VARCHAR(255) NOT NULL
  );
"""

CREATE_INVOICES = """
  CREATE TABLE IF NOT EXISTS invoices (
    id UUID DEFAULT uuid_generate_v4() PRIMARY KEY,
    customer_id UUID NOT NULL,
    amount INT NOT NULL,
    status VARCHAR(255) NOT NULL,
    date DATE NOT NULL
  );
"""

CREATE_REVENUE = """
  CREATE TABLE IF NOT EXISTS revenue (
    month VARCHAR(4) NOT NULL UNIQUE,
    revenue INT NOT NULL
  );
"""

INSERT_USER = """
  INSERT INTO users (id, name, email, password)
  VALUES (:id, :name, :email, :password)
  ON CONFLICT (id) DO NOTHING;
"""

INSERT_CUSTOMER = """
  INSERT INTO customers (id, name, email, image_url)
  VALUES (:id, :name, :email, :image_url)
  ON CONFLICT (id) DO NOTHING;
"""

# invoice ids are generated by the database, so the whole row is the key
INSERT_INVOICE = """
  INSERT INTO invoices (customer_id, amount, status, date)
  SELECT CAST(:customer_id AS UUID), :amount, :status, CAST(:date AS DATE)
  WHERE NOT EXISTS (
    SELECT 1 FROM invoices
    WHERE customer_id = CAST(:customer_id AS UUID)
      AND amount = :amount
      AND status = :status
      AND date = CAST(:date AS DATE)
  );
"""

INSERT_REVENUE = """
  INSERT INTO revenue (month, revenue)
  VALUES (:month, :revenue)
  ON CONFLICT (month) DO NOTHING;
"""


def ensure_uuid_extension(client: SeedClient) -> None:
  client.execute(CREATE_UUID_EXTENSION)


def _run_inserts(client: SeedClient, table: str, statements: Iterable[Statement]) -> SeedReport:
  report = SeedReport(name=table)
  for sql, params in statements:
    report.rows += 1
    report.inserted += client.execute(sql, params)
  return report


def _user_inserts(users: Iterable[User]) -> Iterator[Statement]:
  for user in users:
    params = user.model_dump(exclude={"password"})
    params["password"] = hash_password(user.password)
    yield INSERT_USER, params


def _customer_inserts(customers: Iterable[Customer]) -> Iterator[Statement]:
  for customer in customers:
    yield INSERT_CUSTOMER, customer.model_dump()


def _invoice_inserts(invoices: Iterable[Invoice]) -> Iterator[Statement]:
  for invoice in invoices:
    params = invoice.model_dump()
    params["date"] = invoice.date.isoformat()
    yield INSERT_INVOICE, params


def _revenue_inserts(revenue: Iterable[Revenue]) -> Iterator[Statement]:
  for rev in revenue:
    yield INSERT_REVENUE, rev.model_dump()


def check_invoice_customers(invoices: Sequence[Invoice], customers: Sequence[Customer]) -> None:
  known = {c.id for c in customers}
  unknown = sorted({i.customer_id for i in invoices if i.customer_id not in known})
  if unknown:
    raise ValueError(f"Invoices reference unknown customers: {', '.join(unknown)}")


def seed_users(client: SeedClient, users: Sequence[User]) -> SeedReport:
  try:
    ensure_uuid_extension(client)
    client.execute(CREATE_USERS)
    logger.info('Created "users" table')

    report = _run_inserts(client, "users", _user_inserts(users))
    logger.info("Seeded %d users (%d new)", report.rows, report.inserted)
    return report
  except Exception:
    logger.exception("Error seeding users")
    raise


def seed_customers(client: SeedClient, customers: Sequence[Customer]) -> SeedReport:
  try:
    ensure_uuid_extension(client)
    client.execute(CREATE_CUSTOMERS)
    logger.info('Created "customers" table')

    report = _run_inserts(client, "customers", _customer_inserts(customers))
    logger.info("Seeded %d customers (%d new)", report.rows, report.inserted)
    return report
  except Exception:
    logger.exception("Error seeding customers")
    raise


def seed_invoices(client: SeedClient, invoices: Sequence[Invoice], customers: Sequence[Customer]) -> SeedReport:
  try:
    check_invoice_customers(invoices, customers)
    ensure_uuid_extension(client)
    client.execute(CREATE_INVOICES)
    logger.info('Created "invoices" table')

    report = _run_inserts(client, "invoices", _invoice_inserts(invoices))
    logger.info("Seeded %d invoices (%d new)", report.rows, report.inserted)
    return report
  except Exception:
    logger.exception("Error seeding invoices")
    raise


def seed_revenue(client: SeedClient, revenue: Sequence[Revenue]) -> SeedReport:
  try:
    client.execute(CREATE_REVENUE)
    logger.info('Created "revenue" table')

    report = _run_inserts(client, "revenue", _revenue_inserts(revenue))
    logger.info("Seeded %d revenue records (%d new)", report.rows, report.inserted)
    return report
  except Exception:
    logger.exception("Error seeding revenue")
    raise


def seed_all(client: SeedClient, dataset=placeholder_data) -> List[SeedReport]:
  """Seed every table in dependency order; the first failure stops the run."""
  logger.info("Seeding users...")
  users = seed_users(client, dataset.users)

  logger.info("Seeding customers...")
  customers = seed_customers(client, dataset.customers)

  logger.info("Seeding invoices...")
  invoices = seed_invoices(client, dataset.invoices, dataset.customers)

  logger.info("Seeding revenue...")
  revenue = seed_revenue(client, dataset.revenue)

  return [users, customers, invoices, revenue]


def run_seed(connector=connect, dataset=placeholder_data) -> List[SeedReport]:
  logger.info("Starting database seed...")
  with connector() as client:
    reports = seed_all(client, dataset)
  logger.info("Database seeded successfully!")
  return reports


if __name__ == "__main__":
  logging.basicConfig(level=logging.INFO)
  for r in run_seed():
    print(f"{r.name}: {r.inserted} inserted, {r.skipped} skipped")
