"""File upload service for listing images and avatars."""

import time
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4


class FileStorage(Protocol):
    """Interface for a bucket-based object store."""

    def upload(self, bucket: str, path: str, content: bytes, content_type: str) -> None:
        """Store bytes at the path inside a bucket."""

    def public_url(self, bucket: str, path: str) -> str:
        """Return the public URL for an object."""


@dataclass
class StorageService:
    """Service that names and stores uploaded files."""

    storage: FileStorage
    bucket: str

    def upload_file(
        self,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
        bucket: str | None = None,
    ) -> str:
        """Upload a file under a unique name and return its public URL."""
        if not content:
            raise ValueError("Cannot upload an empty file")
        target_bucket = bucket or self.bucket
        path = f"{target_bucket}/{_unique_name(filename)}"
        self.storage.upload(target_bucket, path, content, content_type)
        return self.storage.public_url(target_bucket, path)


def _unique_name(filename: str) -> str:
    """Return `<epoch-ms>-<random>.<ext>` keeping the original extension."""
    stem = f"{int(time.time() * 1000)}-{uuid4().hex[:12]}"
    if "." not in filename:
        return stem
    extension = filename.rsplit(".", maxsplit=1)[-1].lower()
    return f"{stem}.{extension}" if extension else stem
