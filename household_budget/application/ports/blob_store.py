"""Port for the opaque blob store holding uploaded documents."""

from typing import Protocol


class BlobStorePort(Protocol):
    """Port exposing keyed blob storage.

    The store owns its acceptance policy (size and content types) and
    raises StoreError when it rejects an object.
    """

    def put(self, key: str, content: bytes, content_type: str) -> None:
        """Store a new object under ``key``; existing keys are rejected."""

    def get(self, key: str) -> bytes:
        """Return the content stored under ``key``."""

    def remove(self, key: str) -> None:
        """Delete the object stored under ``key``."""


__all__ = ["BlobStorePort"]
