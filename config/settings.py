from pathlib import Path
import os
from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env
load_dotenv(os.path.join(BASE_DIR, ".env"))

OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", BASE_DIR / "output"))

OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
(OUTPUT_DIR / "json").mkdir(parents=True, exist_ok=True)
(OUTPUT_DIR / "csv").mkdir(parents=True, exist_ok=True)
(OUTPUT_DIR / "html").mkdir(parents=True, exist_ok=True)

# Imports above this many data rows need an explicit confirmation
LARGE_IMPORT_THRESHOLD = int(os.getenv("LARGE_IMPORT_THRESHOLD", "5000"))

DEFAULT_CITY_REGION = os.getenv("DEFAULT_CITY_REGION", "RS")
DEFAULT_IMPORT_POLICY = os.getenv("DEFAULT_IMPORT_POLICY", "skip")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE_NAME = os.getenv("LOG_FILE_NAME", "candidate_import.log")
