from minio import Minio

from w4ffle.config import get_settings
from w4ffle.services.storage.client import ImageStore


def make_image_store() -> ImageStore:
    """
    Create the image store from settings.

    Returns:
        ImageStore: bucket reader backed by a MinIO/S3 client
    """
    settings = get_settings()
    client = Minio(
        settings.minio_endpoint,
        access_key=settings.minio_access_key,
        secret_key=settings.minio_secret_key,
        secure=settings.minio_secure,
        region=settings.minio_region,
    )
    return ImageStore(client=client, bucket=settings.minio_bucket, chunk_size=settings.image_chunk_size)
