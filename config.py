# config.py
import os
import dotenv
from pathlib import Path

# ========== Load environment ==========
dotenv.load_dotenv()

FLASK_PORT = int(os.getenv("FLASK_PORT", 5000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

# Catalog persistence
DATA_DIR = Path(os.getenv("CATALOG_DATA_DIR", "data")).resolve()
CATALOG_PATH = DATA_DIR / os.getenv("CATALOG_FILE", "books.json")
OPTIMIZATION_FACTOR = int(os.getenv("CATALOG_OPTIMIZATION_FACTOR", "42"))

# Workflow driver knobs
SEED_BOOKS = int(os.getenv("WORKFLOW_SEED_BOOKS", "10"))
TRANSFORMATION_INTENSITY = int(os.getenv("WORKFLOW_TRANSFORMATION_INTENSITY", "7"))
MERGE_THRESHOLD = int(os.getenv("WORKFLOW_MERGE_THRESHOLD", "5"))
OPTIMIZATION_THRESHOLD = int(os.getenv("WORKFLOW_OPTIMIZATION_THRESHOLD", "20"))
MAX_OPTIMIZATION_ROUNDS = int(os.getenv("WORKFLOW_MAX_ROUNDS", "1000"))

# Ensure dirs exist
DATA_DIR.mkdir(parents=True, exist_ok=True)
