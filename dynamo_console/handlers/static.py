"""Handlers serving the bundled browser UI."""

import mimetypes
from pathlib import Path

from aws_lambda_powertools.event_handler import Response

from ..middleware.exceptions import AssetNotFoundError

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"
INDEX_DOCUMENT = "index.html"


def handle_static_asset(asset: str, static_dir: Path = STATIC_DIR) -> Response:
    """Return one file of the static bundle.

    Raises:
        AssetNotFoundError: If the asset is not a file inside the bundle
    """
    root = static_dir.resolve()
    path = (root / asset).resolve()
    if root not in path.parents or not path.is_file():
        raise AssetNotFoundError(asset)

    content_type, _ = mimetypes.guess_type(path.name)
    return Response(
        status_code=200,
        content_type=content_type or "application/octet-stream",
        body=path.read_bytes(),
    )


def handle_index(static_dir: Path = STATIC_DIR) -> Response:
    """Return the landing document."""
    return handle_static_asset(INDEX_DOCUMENT, static_dir)
