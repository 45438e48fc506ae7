"""Temporary on-disk storage for uploaded files.

Every upload gets its own path under the uploads directory, named from the
current time in milliseconds plus a random integer so concurrent uploads never
collide. Files are owned by the request that stored them and are removed as
soon as that request is done with them.
"""

import logging
import random
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from legalaid.errors import StorageError

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "files"


class TempFileStore:
    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def allocate_path(self, original_name: str) -> Path:
        suffix = Path(original_name or "").suffix
        unique = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return self.root / f"{FILENAME_PREFIX}-{unique}{suffix}"

    def save(self, original_name: str, data: bytes) -> Path:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            path = self.allocate_path(original_name)
            path.write_bytes(data)
        except OSError as e:
            logger.error(f"Could not store upload | filename={original_name} | error={e}")
            raise StorageError(details=str(e)) from e

        logger.info(f"Stored upload | filename={original_name} | path={path.name} | size={len(data)}")
        return path

    def delete(self, path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            logger.warning(f"Temp file already removed | path={path.name}")
        except OSError as e:
            logger.error(f"Could not remove temp file | path={path.name} | error={e}")

    @contextmanager
    def stored(self, original_name: str, data: bytes) -> Iterator[Path]:
        path = self.save(original_name, data)
        try:
            yield path
        finally:
            self.delete(path)
