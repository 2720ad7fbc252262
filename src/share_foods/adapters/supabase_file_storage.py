"""Supabase Storage adapter for uploaded files."""

from dataclasses import dataclass

from supabase import Client

from share_foods.services.storage import FileStorage


@dataclass
class SupabaseFileStorage(FileStorage):
    """Stores files in Supabase Storage buckets."""

    client: Client

    def upload(self, bucket: str, path: str, content: bytes, content_type: str) -> None:
        """Upload bytes to a bucket path."""
        self.client.storage.from_(bucket).upload(
            path, content, {"content-type": content_type}
        )

    def public_url(self, bucket: str, path: str) -> str:
        """Return the public URL for an object."""
        return self.client.storage.from_(bucket).get_public_url(path)
