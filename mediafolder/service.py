"""Folder service - dissolve and move operations on the media folder tree.

Dissolving a folder removes it together with the configuration it exclusively
owns. Its direct children are handed to the dissolved folder's parent, or
become root folders when there is none.
"""
import logging

from mediafolder.exceptions import (
    MediaFolderAlreadyExistsException,
    MediaFolderConfigurationAlreadyExistsException,
    MediaFolderConfigurationNotFoundException,
    MediaFolderCyclicMoveException,
    MediaFolderNotFoundException,
)
from mediafolder.models import (
    CreateFolderPayload,
    Folder,
    FolderConfiguration,
    new_id,
)
from mediafolder.store import MediaFolderStore

logger = logging.getLogger(__name__)


class FolderService:
    def __init__(self, store: MediaFolderStore):
        self.store = store

    def _require_folder(self, folder_id: str) -> Folder:
        folder = self.store.get_folder(folder_id)
        if folder is None:
            raise MediaFolderNotFoundException(folder_id)
        return folder

    def get_folder(self, folder_id: str) -> Folder:
        return self._require_folder(folder_id)

    def get_configuration(self, configuration_id: str) -> FolderConfiguration:
        configuration = self.store.get_configuration(configuration_id)
        if configuration is None:
            raise MediaFolderConfigurationNotFoundException(configuration_id)
        return configuration

    def create_folder(self, payload: CreateFolderPayload) -> Folder:
        """Create a folder and, unless it inherits from its parent, its configuration.

        Raises:
            MediaFolderAlreadyExistsException: explicit id is already taken
            MediaFolderConfigurationAlreadyExistsException: explicit configuration id is already taken
            MediaFolderNotFoundException: parent does not exist
        """
        folder_id = payload.id or new_id()
        with self.store.transaction():
            if self.store.get_folder(folder_id) is not None:
                raise MediaFolderAlreadyExistsException(folder_id)

            parent = None
            if payload.parentId:
                parent = self._require_folder(payload.parentId)

            if payload.useParentConfiguration and parent is not None:
                configuration_id = parent.configurationId
            else:
                data = payload.configuration.model_dump() if payload.configuration else {}
                data["id"] = data.get("id") or new_id()
                if self.store.get_configuration(data["id"]) is not None:
                    raise MediaFolderConfigurationAlreadyExistsException(data["id"])
                configuration = FolderConfiguration(**data)
                self.store.put_configuration(configuration)
                configuration_id = configuration.id

            folder = Folder(
                id=folder_id,
                name=payload.name,
                parentId=parent.id if parent else None,
                useParentConfiguration=payload.useParentConfiguration and parent is not None,
                configurationId=configuration_id,
            )
            self.store.put_folder(folder)

        logger.info("media folder created: id=%s parent=%s", folder.id, folder.parentId)
        return folder

    def dissolve(self, folder_id: str) -> None:
        with self.store.transaction():
            folder = self._require_folder(folder_id)
            new_parent = self.store.get_folder(folder.parentId) if folder.parentId else None

            for child in self.store.children_of(folder.id):
                self._reassign_child(child, folder, new_parent)

            self.store.delete_folder(folder.id)

            config_deleted = False
            if folder.configurationId and not self.store.folders_using_configuration(
                folder.configurationId
            ):
                config_deleted = self.store.delete_configuration(folder.configurationId)

        logger.info(
            "media folder dissolved: id=%s configuration_deleted=%s",
            folder_id,
            config_deleted,
        )

    def _reassign_child(self, child: Folder, dissolved: Folder, new_parent: Folder | None) -> None:
        update = {"parentId": new_parent.id if new_parent else None}
        inherits = child.useParentConfiguration and child.configurationId == dissolved.configurationId
        if inherits:
            if new_parent is not None:
                update["configurationId"] = new_parent.configurationId
            else:
                # root folders cannot inherit
                source = self.store.get_configuration(dissolved.configurationId)
                data = source.model_dump() if source else {}
                data["id"] = new_id()
                copy = FolderConfiguration(**data)
                self.store.put_configuration(copy)
                update["configurationId"] = copy.id
                update["useParentConfiguration"] = False
        self.store.put_folder(child.model_copy(update=update))

    def move(self, folder_id: str, target_parent_id: str | None = None) -> None:
        """Reparent a folder. ``None`` as target moves it to root.

        The folder to move is validated before the target.
        """
        with self.store.transaction():
            folder = self._require_folder(folder_id)
            if target_parent_id is not None:
                self._require_folder(target_parent_id)
                if self._is_same_or_descendant(target_parent_id, folder.id):
                    logger.warning(
                        "rejected cyclic media folder move: id=%s target=%s",
                        folder_id,
                        target_parent_id,
                    )
                    raise MediaFolderCyclicMoveException(folder_id, target_parent_id)

            self.store.put_folder(folder.model_copy(update={"parentId": target_parent_id}))

        logger.info("media folder moved: id=%s parent=%s", folder_id, target_parent_id)

    def _is_same_or_descendant(self, candidate_id: str, ancestor_id: str) -> bool:
        seen = set()
        current = candidate_id
        while current is not None and current not in seen:
            if current == ancestor_id:
                return True
            seen.add(current)
            node = self.store.get_folder(current)
            current = node.parentId if node else None
        return False
