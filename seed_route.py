# seed_route.py
import logging
import os
import traceback
from datetime import datetime, timezone

from dotenv import load_dotenv
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from db import connect
from seed import run_seed

load_dotenv()

logger = logging.getLogger(__name__)

SEED_EXPOSE_STACK = os.getenv("SEED_EXPOSE_STACK", "true").strip().lower() in ("1", "true", "yes")

router = APIRouter(tags=["seed"])

def get_connector():
  return connect

def _utc_timestamp() -> str:
  return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

@router.get("/seed")
def seed_database(connector=Depends(get_connector)):
  try:
    run_seed(connector)
  except Exception as e:
    logger.error("Error during seeding: %s", e)
    body = {"error": str(e) or e.__class__.__name__}
    if SEED_EXPOSE_STACK:
      body["stack"] = traceback.format_exc()
    return JSONResponse(status_code=500, content=body)

  return {"message": "Database seeded successfully", "timestamp": _utc_timestamp()}
