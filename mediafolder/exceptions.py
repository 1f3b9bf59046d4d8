"""Domain errors raised by the folder service.

Each error carries the HTTP status and the machine-readable code that the API
layer puts into the ``errors`` envelope.
"""


class ApiException(Exception):
    status_code = 500
    code = "FRAMEWORK_EXCEPTION"
    title = "Internal Server Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_error(self) -> dict:
        return {
            "status": str(self.status_code),
            "code": self.code,
            "title": self.title,
            "detail": self.message,
        }


class InvalidApiVersionException(ApiException):
    status_code = 404
    code = "FRAMEWORK_INVALID_API_VERSION"
    title = "Not Found"

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"API version v{version} is not supported")


class MediaFolderException(ApiException):
    code = "MEDIA_FOLDER_EXCEPTION"


class MediaFolderNotFoundException(MediaFolderException):
    """Raised when a folder id (source or target) does not resolve."""

    status_code = 404
    code = "MEDIA_FOLDER_NOT_FOUND_EXCEPTION"
    title = "Not Found"

    def __init__(self, folder_id: str) -> None:
        self.folder_id = folder_id
        super().__init__(f'Could not find media folder with id "{folder_id}"')


class MediaFolderConfigurationNotFoundException(MediaFolderException):
    status_code = 404
    code = "MEDIA_FOLDER_CONFIGURATION_NOT_FOUND_EXCEPTION"
    title = "Not Found"

    def __init__(self, configuration_id: str) -> None:
        self.configuration_id = configuration_id
        super().__init__(
            f'Could not find media folder configuration with id "{configuration_id}"'
        )


class MediaFolderAlreadyExistsException(MediaFolderException):
    status_code = 409
    code = "MEDIA_FOLDER_ALREADY_EXISTS_EXCEPTION"
    title = "Conflict"

    def __init__(self, folder_id: str) -> None:
        self.folder_id = folder_id
        super().__init__(f'Media folder with id "{folder_id}" already exists')


class MediaFolderCyclicMoveException(MediaFolderException):
    """Raised when a folder would become its own ancestor."""

    status_code = 400
    code = "MEDIA_FOLDER_CYCLIC_MOVE_EXCEPTION"
    title = "Bad Request"

    def __init__(self, folder_id: str, target_id: str) -> None:
        self.folder_id = folder_id
        self.target_id = target_id
        super().__init__(
            f'Cannot move media folder "{folder_id}" into itself or its descendant "{target_id}"'
        )


class MediaFolderConfigurationAlreadyExistsException(MediaFolderException):
    status_code = 409
    code = "MEDIA_FOLDER_CONFIGURATION_ALREADY_EXISTS_EXCEPTION"
    title = "Conflict"

    def __init__(self, configuration_id: str) -> None:
        self.configuration_id = configuration_id
        super().__init__(
            f'Media folder configuration with id "{configuration_id}" already exists'
        )
