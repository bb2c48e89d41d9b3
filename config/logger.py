import logging
from config.settings import LOG_FILE_NAME, LOG_LEVEL, OUTPUT_DIR

LOG_FILE = OUTPUT_DIR / "logs" / LOG_FILE_NAME
LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

# Unknown names fall back to INFO
level = logging.getLevelName(LOG_LEVEL)
if not isinstance(level, int):
    level = logging.INFO

logger = logging.getLogger("candidate_importer")
logger.setLevel(level)

formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

if not logger.handlers:
    file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)
