import os
import logging
from dotenv import load_dotenv

load_dotenv()

# Gemini (set GEMINI_API_KEY in env or .env; without it the service answers from mock payloads)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")
GEMINI_MAPS_MODEL = os.getenv("GEMINI_MAPS_MODEL", "gemini-2.5-flash")

BACKEND_URL = os.getenv("BACKEND_URL", "http://127.0.0.1:5000")
BACKEND_TIMEOUT = float(os.getenv("BACKEND_TIMEOUT", "60"))

DB_PATH = os.getenv("DB_PATH", "history.db")
RAW_LOG = os.getenv("RAW_LOG", "llm_raw_logs.txt")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
