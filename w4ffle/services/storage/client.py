import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from minio import Minio
from minio.error import S3Error

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
MISSING_OBJECT_CODES = {"NoSuchKey", "NoSuchObject"}


@dataclass
class StoredImage:
    """An object read from the image bucket, body not yet consumed.

    ``close`` releases the underlying storage connection; it is safe to call
    more than once and whether or not ``body`` was read.
    """

    key: str
    content_type: str
    body: Iterator[bytes]
    close: Callable[[], None] = field(default=lambda: None, repr=False)


class ImageStore:
    """Read-only access to the bucket that holds puzzle images."""

    def __init__(self, client: Minio, bucket: str, chunk_size: int = 64 * 1024):
        self._client = client
        self.bucket = bucket
        self.chunk_size = chunk_size

    def get(self, key: str) -> Optional[StoredImage]:
        """Open the object stored under ``key``; ``None`` if there is none."""
        try:
            response = self._client.get_object(self.bucket, key)
        except S3Error as e:
            if e.code in MISSING_OBJECT_CODES:
                return None
            logger.error(f"Failed to read {key!r} from bucket {self.bucket}: {e}")
            raise

        released = False

        def release() -> None:
            nonlocal released
            if released:
                return
            released = True
            response.close()
            response.release_conn()

        content_type = response.headers.get("Content-Type") or DEFAULT_CONTENT_TYPE
        return StoredImage(
            key=key,
            content_type=content_type,
            body=self._stream(response, release),
            close=release,
        )

    def _stream(self, response, release: Callable[[], None]) -> Iterator[bytes]:
        try:
            yield from response.stream(self.chunk_size)
        finally:
            release()
