from typing import Annotated, Callable, Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from w4ffle.config import Settings, get_settings
from w4ffle.db.interfaces.postgresql import PostgreSQLDatabase
from w4ffle.services.images.client import ImageProxyService
from w4ffle.services.images.factory import make_image_proxy_service
from w4ffle.services.puzzles.calendar import today_utc_id
from w4ffle.services.puzzles.client import PuzzleService, image_proxy_url
from w4ffle.services.puzzles.factory import make_puzzle_service
from w4ffle.services.storage.client import ImageStore

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_database(request: Request) -> PostgreSQLDatabase:
    return request.app.state.database


DatabaseDep = Annotated[PostgreSQLDatabase, Depends(get_database)]


def get_session(database: DatabaseDep) -> Generator[Session, None, None]:
    with database.get_session() as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]


def get_image_store(request: Request) -> ImageStore:
    return request.app.state.image_store


def get_puzzle_service(session: SessionDep) -> PuzzleService:
    return make_puzzle_service(session)


def get_image_proxy_service(
    store: Annotated[ImageStore, Depends(get_image_store)],
) -> ImageProxyService:
    return make_image_proxy_service(store)


def get_today() -> str:
    return today_utc_id()


def get_image_ref(request: Request, settings: SettingsDep) -> Callable[[str], str]:
    """How storage keys are presented to clients for this request."""
    if settings.expose_raw_image_keys:
        return lambda key: key
    base_url = settings.public_base_url or str(request.base_url)
    return lambda key: image_proxy_url(base_url, key)


PuzzleServiceDep = Annotated[PuzzleService, Depends(get_puzzle_service)]
ImageProxyDep = Annotated[ImageProxyService, Depends(get_image_proxy_service)]
TodayDep = Annotated[str, Depends(get_today)]
ImageRefDep = Annotated[Callable[[str], str], Depends(get_image_ref)]
