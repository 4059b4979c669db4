"""Unit tests for the static bundle handlers."""

import tempfile
import unittest
from pathlib import Path

from dynamo_console.handlers.static import handle_index, handle_static_asset
from dynamo_console.middleware.exceptions import AssetNotFoundError


class TestHandleStaticAsset(unittest.TestCase):
    """Test cases for serving bundled files."""

    def setUp(self):
        """Set up a throwaway bundle directory."""
        self.tmp = tempfile.TemporaryDirectory()
        self.static_dir = Path(self.tmp.name) / "static"
        self.static_dir.mkdir()
        (self.static_dir / "index.html").write_text("<html></html>", encoding="utf-8")
        (self.static_dir / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe\x00")
        (Path(self.tmp.name) / "secret.txt").write_text("nope", encoding="utf-8")

    def tearDown(self):
        """Tear down the bundle directory."""
        self.tmp.cleanup()

    def test_binary_asset_is_served_unchanged(self):
        """Non-UTF-8 files come back byte for byte."""
        response = handle_static_asset("logo.png", self.static_dir)

        self.assertEqual(200, response.status_code)
        self.assertEqual(b"\x89PNG\r\n\x1a\n\xff\xfe\x00", response.body)
        self.assertEqual("image/png", response.headers["Content-Type"])

    def test_index_document(self):
        response = handle_index(self.static_dir)

        self.assertEqual(b"<html></html>", response.body)
        self.assertEqual("text/html", response.headers["Content-Type"])

    def test_missing_and_escaping_assets(self):
        for asset in ("missing.js", "../secret.txt", ""):
            with self.assertRaises(AssetNotFoundError):
                handle_static_asset(asset, self.static_dir)
