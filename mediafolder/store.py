"""SQLite persistence for media folders and their configurations.

The store is deliberately narrow: get/put/delete per entity plus a
``transaction()`` block. Writes issued outside a transaction are committed
immediately; writes inside one are committed together or rolled back.
"""
import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from mediafolder.models import Folder, FolderConfiguration

logger = logging.getLogger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS media_folder_configuration (
        id TEXT PRIMARY KEY,
        create_thumbnails INTEGER NOT NULL DEFAULT 1,
        keep_aspect_ratio INTEGER NOT NULL DEFAULT 1,
        thumbnail_quality INTEGER NOT NULL DEFAULT 80
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS media_folder (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        parent_id TEXT,
        use_parent_configuration INTEGER NOT NULL DEFAULT 0,
        configuration_id TEXT
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_media_folder_parent ON media_folder(parent_id)",
    "CREATE INDEX IF NOT EXISTS idx_media_folder_configuration ON media_folder(configuration_id)",
)


def _row_to_folder(row: sqlite3.Row | None) -> Folder | None:
    if row is None:
        return None
    return Folder(
        id=row["id"],
        name=row["name"],
        parentId=row["parent_id"],
        useParentConfiguration=bool(row["use_parent_configuration"]),
        configurationId=row["configuration_id"],
    )


def _row_to_configuration(row: sqlite3.Row | None) -> FolderConfiguration | None:
    if row is None:
        return None
    return FolderConfiguration(
        id=row["id"],
        createThumbnails=bool(row["create_thumbnails"]),
        keepAspectRatio=bool(row["keep_aspect_ratio"]),
        thumbnailQuality=row["thumbnail_quality"],
    )


class MediaFolderStore:
    def __init__(self, db_path: Path | str):
        self.db_path = str(db_path)
        self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.RLock()
        self._depth = 0

    def init_schema(self) -> None:
        with self._lock:
            for stmt in SCHEMA:
                self._conn.execute(stmt)
            self._conn.commit()

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def ping(self) -> bool:
        with self._lock:
            return self._conn.execute("SELECT 1").fetchone()[0] == 1

    @contextmanager
    def transaction(self) -> Iterator["MediaFolderStore"]:
        """Group writes into one atomic unit. Nested blocks join the outer one."""
        with self._lock:
            self._depth += 1
            try:
                yield self
            except BaseException:
                self._depth -= 1
                if self._depth == 0:
                    self._conn.rollback()
                    logger.warning("media folder transaction rolled back")
                raise
            else:
                self._depth -= 1
                if self._depth == 0:
                    self._conn.commit()

    def _write(self, sql: str, parameters: tuple = ()) -> sqlite3.Cursor:
        with self._lock:
            cursor = self._conn.execute(sql, parameters)
            if self._depth == 0:
                self._conn.commit()
            return cursor

    def _fetchone(self, sql: str, parameters: tuple = ()) -> sqlite3.Row | None:
        with self._lock:
            return self._conn.execute(sql, parameters).fetchone()

    def _fetchall(self, sql: str, parameters: tuple = ()) -> List[sqlite3.Row]:
        with self._lock:
            return self._conn.execute(sql, parameters).fetchall()

    # folders

    def get_folder(self, folder_id: str) -> Folder | None:
        return _row_to_folder(
            self._fetchone("SELECT * FROM media_folder WHERE id = ?", (folder_id,))
        )

    def put_folder(self, folder: Folder) -> None:
        self._write(
            """INSERT INTO media_folder
                   (id, name, parent_id, use_parent_configuration, configuration_id)
               VALUES (?, ?, ?, ?, ?)
               ON CONFLICT(id) DO UPDATE SET
                   name = excluded.name,
                   parent_id = excluded.parent_id,
                   use_parent_configuration = excluded.use_parent_configuration,
                   configuration_id = excluded.configuration_id""",
            (
                folder.id,
                folder.name,
                folder.parentId,
                int(folder.useParentConfiguration),
                folder.configurationId,
            ),
        )

    def delete_folder(self, folder_id: str) -> bool:
        cursor = self._write("DELETE FROM media_folder WHERE id = ?", (folder_id,))
        return cursor.rowcount > 0

    def children_of(self, folder_id: str) -> List[Folder]:
        rows = self._fetchall(
            "SELECT * FROM media_folder WHERE parent_id = ? ORDER BY name, id",
            (folder_id,),
        )
        return [_row_to_folder(r) for r in rows]

    def folders_using_configuration(self, configuration_id: str) -> List[Folder]:
        rows = self._fetchall(
            "SELECT * FROM media_folder WHERE configuration_id = ? ORDER BY name, id",
            (configuration_id,),
        )
        return [_row_to_folder(r) for r in rows]

    # configurations

    def get_configuration(self, configuration_id: str) -> FolderConfiguration | None:
        return _row_to_configuration(
            self._fetchone(
                "SELECT * FROM media_folder_configuration WHERE id = ?",
                (configuration_id,),
            )
        )

    def put_configuration(self, configuration: FolderConfiguration) -> None:
        self._write(
            """INSERT INTO media_folder_configuration
                   (id, create_thumbnails, keep_aspect_ratio, thumbnail_quality)
               VALUES (?, ?, ?, ?)
               ON CONFLICT(id) DO UPDATE SET
                   create_thumbnails = excluded.create_thumbnails,
                   keep_aspect_ratio = excluded.keep_aspect_ratio,
                   thumbnail_quality = excluded.thumbnail_quality""",
            (
                configuration.id,
                int(configuration.createThumbnails),
                int(configuration.keepAspectRatio),
                configuration.thumbnailQuality,
            ),
        )

    def delete_configuration(self, configuration_id: str) -> bool:
        cursor = self._write(
            "DELETE FROM media_folder_configuration WHERE id = ?", (configuration_id,)
        )
        return cursor.rowcount > 0
