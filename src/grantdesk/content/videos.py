"""Video catalog files and access filtering.

Each product has one catalog file, ``videos_<Product>.json``, holding a JSON
array of video entries.
"""

import logging
import pathlib

from pydantic import TypeAdapter, ValidationError

from grantdesk.access.authorization import ContentAccess
from grantdesk.common.exceptions import CatalogDecodeError, CatalogReadError
from grantdesk.content.schemas import Video

logger = logging.getLogger(__name__)

_VIDEO_LIST = TypeAdapter(list[Video])


def catalog_path(videos_dir: pathlib.Path, product: str) -> pathlib.Path:
    return pathlib.Path(videos_dir) / f"videos_{product}.json"


def load_videos(videos_dir: pathlib.Path, product: str) -> list[Video]:
    """Read and decode a product's video catalog.

    Raises:
        CatalogReadError: the file is missing or unreadable.
        CatalogDecodeError: the file is not a JSON array of videos.
    """
    path = catalog_path(videos_dir, product)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        logger.warning("Could not read video catalog %s: %s", path, exc)
        raise CatalogReadError(f"open {path}: {exc.strerror or exc}") from exc

    try:
        return _VIDEO_LIST.validate_json(raw)
    except ValidationError as exc:
        logger.warning("Could not decode video catalog %s: %s", path, exc)
        raise CatalogDecodeError(
            f"error when trying to decode video catalog {path.name}: {exc.errors()[0]['msg']}"
        ) from exc


def filter_videos(videos: list[Video], access: ContentAccess) -> list[Video]:
    """Keep the videos visible at the given access level."""
    if access is ContentAccess.FULL:
        return list(videos)
    if access is ContentAccess.BASIC:
        return [v for v in videos if v.is_basic]
    return []
