import logging

from w4ffle.exceptions import BadImageKey, ImageNotFound
from w4ffle.services.storage.client import ImageStore, StoredImage

logger = logging.getLogger(__name__)


class ImageProxyService:
    """Serves stored image objects by key."""

    def __init__(self, store: ImageStore, cache_control: str):
        self._store = store
        self.cache_control = cache_control

    def serve(self, key: str) -> StoredImage:
        """Open the image stored under an already-decoded key.

        :raises BadImageKey: the key is empty
        :raises ImageNotFound: nothing is stored under the key
        """
        if not key:
            raise BadImageKey("Empty image key")

        image = self._store.get(key)
        if image is None:
            raise ImageNotFound(key)

        logger.debug("Serving image", extra={"key": key, "content_type": image.content_type})
        return image
