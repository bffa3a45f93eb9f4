from w4ffle.config import get_settings
from w4ffle.services.images.client import ImageProxyService
from w4ffle.services.storage.client import ImageStore


def make_image_proxy_service(store: ImageStore) -> ImageProxyService:
    settings = get_settings()
    return ImageProxyService(store=store, cache_control=settings.image_cache_control)
