from fastapi import APIRouter
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from w4ffle.dependencies import ImageProxyDep

router = APIRouter(prefix="/img", tags=["images"])


@router.get("/{key:path}", response_class=StreamingResponse)
def get_image(key: str, proxy: ImageProxyDep):
    """Stream a stored image; ``key`` arrives percent-decoded and may contain ``/``."""
    image = proxy.serve(key)
    return StreamingResponse(
        image.body,
        media_type=image.content_type,
        headers={"Cache-Control": proxy.cache_control},
        background=BackgroundTask(image.close),
    )
