"""Local filesystem blob store for uploaded financial documents."""

from pathlib import Path

from household_budget.application.ports.blob_store import BlobStorePort
from household_budget.domain.constants import (
    ALLOWED_STATEMENT_TYPES,
    MAX_STATEMENT_BYTES,
)
from household_budget.domain.errors import NotFound, StoreError
from household_budget.infrastructure.logging.logger import get_app_logger


class LocalBlobStore(BlobStorePort):
    """Blob store keeping each object as a file below a root directory.

    Keys map to relative paths (``<month>/<epoch-ms>-<filename>``). Objects
    larger than ``max_bytes`` or of a content type outside
    ``allowed_types`` are rejected.
    """

    def __init__(
        self,
        root: Path,
        max_bytes: int = MAX_STATEMENT_BYTES,
        allowed_types=ALLOWED_STATEMENT_TYPES,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            root: Directory holding every blob; created on first write.
            max_bytes: Largest accepted object size.
            allowed_types: Accepted MIME types.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._root = Path(root)
        self._max_bytes = max_bytes
        self._allowed_types = frozenset(allowed_types)
        self._logger = logger or get_app_logger()

    def put(self, key: str, content: bytes, content_type: str) -> None:
        if len(content) > self._max_bytes:
            raise StoreError(
                f"Blob {key} is {len(content)} bytes; "
                f"the limit is {self._max_bytes}"
            )
        if content_type not in self._allowed_types:
            raise StoreError(f"Content type not allowed: {content_type!r}")
        path = self._path_for(key)
        if path.exists():
            raise StoreError(f"Blob already exists: {key}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            raise StoreError(f"Could not write blob {key}: {exc}") from exc
        self._logger.info(f"Stored blob {key} ({len(content)} bytes)")

    def get(self, key: str) -> bytes:
        path = self._path_for(key)
        if not path.is_file():
            raise NotFound("blob", key)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StoreError(f"Could not read blob {key}: {exc}") from exc

    def remove(self, key: str) -> None:
        path = self._path_for(key)
        if not path.is_file():
            raise NotFound("blob", key)
        try:
            path.unlink()
        except OSError as exc:
            raise StoreError(f"Could not remove blob {key}: {exc}") from exc

    def _path_for(self, key: str) -> Path:
        root = self._root.resolve()
        path = (root / key).resolve()
        if path == root or root not in path.parents:
            raise StoreError(f"Blob key escapes the store root: {key!r}")
        return path


__all__ = ["LocalBlobStore"]
