import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seed_route import router as seed_router

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").strip().upper())

CORS_ORIGINS = [
  x.strip()
  for x in os.getenv("CORS_ORIGINS", "http://127.0.0.1:3000,http://localhost:3000").split(",")
  if x.strip()
]

app = FastAPI(title="Seed Service", version="1.0.0")
app.add_middleware(
  CORSMiddleware,
  allow_origins=CORS_ORIGINS,
  allow_credentials=True,
  allow_methods=["*"],
  allow_headers=["*"],
)

app.include_router(seed_router)


@app.get("/health")
def health():
  return {"ok": True}
