import os
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATABASE_PATH = Path(os.environ.get("MEDIA_FOLDER_DB", str(_PROJECT_ROOT / "media_folder.db"))).resolve()
API_VERSION = int(os.environ.get("API_VERSION", "3"))
LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
DEFAULT_THUMBNAIL_QUALITY = int(os.environ.get("DEFAULT_THUMBNAIL_QUALITY", "80"))
APP_VERSION = (os.environ.get("APP_VERSION") or "").strip() or "dev"

if not 0 <= DEFAULT_THUMBNAIL_QUALITY <= 100:
    raise RuntimeError("DEFAULT_THUMBNAIL_QUALITY must be between 0 and 100")
