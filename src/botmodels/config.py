import os
from dotenv import load_dotenv
from pathlib import Path

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent
DATA_DIR = os.environ.get("BOTMODELS_DATA_DIR", str(BASE_DIR / "data"))
OUTPUT_DIR = os.environ.get("BOTMODELS_OUTPUT_DIR", str(BASE_DIR / "assets" / "models"))
DEFAULT_EMBEDDING = os.environ.get("BOTMODELS_EMBEDDING_MODEL", "sentence-transformers/all-MiniLM-L6-v2")
DEFAULT_BOTS = [b.strip() for b in os.environ.get("BOTMODELS_BOTS", "maid,butler,chef").split(",") if b.strip()]
MAX_WORKERS = int(os.environ.get("BOTMODELS_MAX_WORKERS", "4"))
NORMALIZE_EMBEDDINGS = os.environ.get("BOTMODELS_NORMALIZE_EMBEDDINGS", "true").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("BOTMODELS_LOG_LEVEL", "INFO")
