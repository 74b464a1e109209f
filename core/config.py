# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

# 0) .env
load_dotenv()

# 1) paths
BASE_DIR = Path(__file__).resolve().parent.parent

# 2) server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5002"))
RELOAD = bool(int(os.getenv("RELOAD", "0")))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# per-client screen state (least recently used tab is dropped beyond this)
MAX_CLIENTS = int(os.getenv("MAX_CLIENTS", "1000"))

# 3) DB (hosted postgres)
DB = os.getenv("DB", "postgresql")
DB_USER = os.getenv("DB_USER", "")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_SERVER = os.getenv("DB_SERVER", "")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "")
DB_ECHO = bool(int(os.getenv("DB_ECHO", "0")))

# local dev falls back to a sqlite file when no postgres parts are set
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"{DB}://{DB_USER}:{DB_PASSWORD}@{DB_SERVER}:{DB_PORT}/{DB_NAME}"
    if all([DB_USER, DB_PASSWORD, DB_SERVER, DB_NAME])
    else f"sqlite:///{BASE_DIR / 'scam_registry.db'}",
)

# 4) scheduler / keep-alive
SCHEDULER_TZ = os.getenv("SCHEDULER_TZ", "Asia/Bangkok")
KEEPALIVE_ENABLED = bool(int(os.getenv("KEEPALIVE_ENABLED", "1")))
KEEPALIVE_INTERVAL_HOURS = float(os.getenv("KEEPALIVE_INTERVAL_HOURS", "24"))
KEEPALIVE_CHECK_MINUTES = int(os.getenv("KEEPALIVE_CHECK_MINUTES", "60"))
KEEPALIVE_STATE_FILE = os.getenv("KEEPALIVE_STATE_FILE", str(BASE_DIR / "var" / "keepalive.json"))
