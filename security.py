# security.py
import os

import bcrypt
from dotenv import load_dotenv

load_dotenv()

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
BCRYPT_MAX_BYTES = 72

def _encode(password: str) -> bytes:
  # bcrypt only looks at the first 72 bytes and newer releases reject longer input
  return (password or "").encode("utf-8")[:BCRYPT_MAX_BYTES]

def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
  return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")

def verify_password(plain: str, hashed: str) -> bool:
  try:
    return bcrypt.checkpw(_encode(plain), hashed.encode("utf-8"))
  except ValueError:
    # not a bcrypt hash
    return False
