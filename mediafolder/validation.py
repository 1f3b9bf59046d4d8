from mediafolder.exceptions import (
    MediaFolderConfigurationNotFoundException,
    MediaFolderNotFoundException,
)
from mediafolder.models import normalize_id


def safe_folder_id(folder_id: str) -> str:
    # a malformed id can never resolve, so it is reported as not found
    try:
        return normalize_id(folder_id)
    except ValueError:
        raise MediaFolderNotFoundException(folder_id) from None


def safe_configuration_id(configuration_id: str) -> str:
    try:
        return normalize_id(configuration_id)
    except ValueError:
        raise MediaFolderConfigurationNotFoundException(configuration_id) from None
