"""Shared test fixtures for Grantdesk."""

import json
import os

import pytest
from httpx import ASGITransport, AsyncClient

from grantdesk.accounts.repository import InMemoryUserRepository
from grantdesk.accounts.seed import seed_users


VIDEOS = [
    {
        "type": "basic",
        "url": "https://videos.example.com/intro",
        "thumbnail": "https://videos.example.com/intro.png",
        "title": "Getting started",
        "product_name": "Product1",
    },
    {
        "type": "premium",
        "url": "https://videos.example.com/advanced",
        "thumbnail": "https://videos.example.com/advanced.png",
        "title": "Advanced workflows",
        "product_name": "Product1",
    },
]


@pytest.fixture
def users():
    """A fresh repository per test so grants never leak between tests."""
    return InMemoryUserRepository(seed_users())


@pytest.fixture
def videos_dir(tmp_path):
    (tmp_path / "videos_Product1.json").write_text(json.dumps(VIDEOS))
    (tmp_path / "videos_Backoffice.json").write_text(json.dumps(VIDEOS))
    (tmp_path / "videos_Product2.json").write_text("{not json")
    return tmp_path


@pytest.fixture
def app(users, videos_dir):
    """Create a test app backed by the per-test repository."""
    os.environ["GRANTDESK_VIDEOS_DIR"] = str(videos_dir)
    os.environ["GRANTDESK_LOG_FILE"] = ""
    os.environ.pop("GRANTDESK_TEMPLATES_DIR", None)

    # Clear caches and singletons so new env vars take effect
    from grantdesk.common.config import get_settings
    get_settings.cache_clear()

    from grantdesk.deps import get_user_repository, reset_singletons
    reset_singletons()

    from grantdesk.app import create_app
    application = create_app()
    application.dependency_overrides[get_user_repository] = lambda: users
    return application


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
