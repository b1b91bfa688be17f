# models.py
import datetime as dt
from sqlmodel import SQLModel, Field

# Record shapes only; the tables themselves are created by seed.py DDL.

class User(SQLModel):
  id: str
  name: str = Field(max_length=255)
  email: str
  password: str  # plaintext here, hashed before insert

class Customer(SQLModel):
  id: str
  name: str = Field(max_length=255)
  email: str = Field(max_length=255)
  image_url: str = Field(max_length=255)

class Invoice(SQLModel):
  customer_id: str
  amount: int  # minor units
  status: str = Field(max_length=255)  # pending|paid
  date: dt.date

class Revenue(SQLModel):
  month: str = Field(max_length=4)
  revenue: int

class SeedReport(SQLModel):
  name: str
  rows: int = 0
  inserted: int = 0

  @property
  def skipped(self) -> int:
    return self.rows - self.inserted
