"""Shared FastAPI dependencies: the process-wide store and the folder service."""
import logging
import threading

from mediafolder.config import API_VERSION, DATABASE_PATH
from mediafolder.exceptions import InvalidApiVersionException
from mediafolder.service import FolderService
from mediafolder.store import MediaFolderStore

logger = logging.getLogger(__name__)

_store: MediaFolderStore | None = None
_store_lock = threading.Lock()


def get_store() -> MediaFolderStore:
    global _store
    with _store_lock:
        if _store is None:
            DATABASE_PATH.parent.mkdir(parents=True, exist_ok=True)
            _store = MediaFolderStore(DATABASE_PATH)
            _store.init_schema()
            logger.info("media folder store opened at %s", DATABASE_PATH)
        return _store


def close_store() -> None:
    global _store
    with _store_lock:
        if _store is not None:
            _store.close()
            _store = None


def get_folder_service() -> FolderService:
    return FolderService(get_store())


def check_api_version(version: str) -> str:
    if version != str(API_VERSION):
        raise InvalidApiVersionException(version)
    return version
