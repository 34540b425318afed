import os
from pathlib import Path

# ✅ Database
DEFAULT_DATABASE_PATH = Path("data") / "jobs.db"
DATABASE_PATH = os.getenv("JOBTRACKER_DB_PATH", str(DEFAULT_DATABASE_PATH))

# ✅ Local API (loopback only, consumed by the desktop UI)
API_HOST = "127.0.0.1"
API_PORT = 8765

# ✅ Logging
LOG_LEVEL = "INFO"
LOG_DIR = Path("logs")
