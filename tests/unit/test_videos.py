"""Tests for video catalog loading and filtering."""

import json

import pytest

from grantdesk.access.authorization import ContentAccess
from grantdesk.common.exceptions import CatalogDecodeError, CatalogReadError
from grantdesk.content.schemas import Video
from grantdesk.content.videos import catalog_path, filter_videos, load_videos

from tests.conftest import VIDEOS


def _videos() -> list[Video]:
    return [Video(**v) for v in VIDEOS]


class TestLoadVideos:
    def test_catalog_path_convention(self, tmp_path):
        assert catalog_path(tmp_path, "Product1") == tmp_path / "videos_Product1.json"

    def test_loads_entries(self, tmp_path):
        (tmp_path / "videos_Product1.json").write_text(json.dumps(VIDEOS))
        videos = load_videos(tmp_path, "Product1")
        assert [v.title for v in videos] == ["Getting started", "Advanced workflows"]
        assert videos[0].product_name == "Product1"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogReadError) as exc_info:
            load_videos(tmp_path, "Product9")
        assert "videos_Product9.json" in exc_info.value.message

    def test_invalid_json(self, tmp_path):
        (tmp_path / "videos_Product1.json").write_text("[{")
        with pytest.raises(CatalogDecodeError):
            load_videos(tmp_path, "Product1")

    def test_wrong_shape(self, tmp_path):
        (tmp_path / "videos_Product1.json").write_text(json.dumps({"title": "x"}))
        with pytest.raises(CatalogDecodeError):
            load_videos(tmp_path, "Product1")

    def test_empty_catalog(self, tmp_path):
        (tmp_path / "videos_Product1.json").write_text("[]")
        assert load_videos(tmp_path, "Product1") == []


class TestFilterVideos:
    def test_full_access_keeps_everything(self):
        assert len(filter_videos(_videos(), ContentAccess.FULL)) == 2

    def test_basic_access_keeps_basic_only(self):
        filtered = filter_videos(_videos(), ContentAccess.BASIC)
        assert [v.type for v in filtered] == ["basic"]

    def test_no_access(self):
        assert filter_videos(_videos(), ContentAccess.NONE) == []
