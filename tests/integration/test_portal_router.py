"""Integration tests for the portal pages."""

import pytest

from grantdesk.access.products import AuthorizationKind, ProductCatalog, ProductConfig
from grantdesk.deps import get_product_catalog


class TestIndex:
    async def test_lists_users(self, client):
        resp = await client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "Danilo Bandeira" in resp.text
        assert "Ana Banana" in resp.text
        assert 'href="/users/2/"' in resp.text

    async def test_non_get_redirects(self, client):
        resp = await client.post("/", follow_redirects=False)
        assert resp.status_code == 302
        assert resp.headers["location"] == "/page-not-found/"

    async def test_missing_templates_redirect(self, app, client, tmp_path):
        from fastapi.templating import Jinja2Templates
        app.state.templates = Jinja2Templates(directory=str(tmp_path / "empty"))
        resp = await client.get("/", follow_redirects=False)
        assert resp.status_code == 302
        assert resp.headers["location"] == "/page-not-found/"

    async def test_broken_template_answers_500(self, app, client, tmp_path):
        from fastapi.templating import Jinja2Templates
        (tmp_path / "index.html").write_text("{% for %}")
        app.state.templates = Jinja2Templates(directory=str(tmp_path))
        resp = await client.get("/")
        assert resp.status_code == 500
        assert resp.text == "internal server error"


class TestUserOverview:
    async def test_lists_products(self, client):
        resp = await client.get("/users/2/")
        assert resp.status_code == 200
        assert "Ana Banana" in resp.text
        assert "/users/2/products/product1/" in resp.text
        assert "/users/2/products/product2/" in resp.text
        assert "/users/2/products/backoffice/" in resp.text

    async def test_unknown_user_is_404(self, client):
        resp = await client.get("/users/404/")
        assert resp.status_code == 404
        assert "User not found" in resp.text


class TestUserProductDetail:
    async def test_tier_product(self, client):
        resp = await client.get("/users/2/products/product1/")
        assert resp.status_code == 200
        assert "<li>Premium</li>" in resp.text
        assert "yellow" in resp.text
        assert "Subscribe" in resp.text

    async def test_hyphenated_segment_resolves(self, client):
        resp = await client.get("/users/1/products/product-1/")
        assert resp.status_code == 200
        assert "<li>Basic</li>" in resp.text
        assert "Product 1" in resp.text

    async def test_role_product_lists_permissions(self, client):
        resp = await client.get("/users/2/products/backoffice/")
        assert resp.status_code == 200
        assert "<li>GivePermission</li>" in resp.text
        assert "<li>WatchContent</li>" in resp.text
        assert "Subscribe" not in resp.text

    async def test_unknown_user_is_404(self, client):
        resp = await client.get("/users/404/products/product1/")
        assert resp.status_code == 404

    async def test_unknown_product_redirects(self, client):
        resp = await client.get("/users/1/products/product-3/", follow_redirects=False)
        assert resp.status_code == 302
        assert resp.headers["location"] == "/page-not-found/"

    async def test_product_without_grant_redirects(self, client):
        resp = await client.get("/users/1/products/product2/", follow_redirects=False)
        assert resp.status_code == 302
        assert resp.headers["location"] == "/page-not-found/"

    async def test_missing_style_is_404(self, app, client):
        catalog = ProductCatalog([ProductConfig("Product1", AuthorizationKind.TIER)])
        app.dependency_overrides[get_product_catalog] = lambda: catalog
        resp = await client.get("/users/1/products/product1/")
        assert resp.status_code == 404
        assert resp.text == "product not found"


class TestStaticPages:
    async def test_page_not_found(self, client):
        resp = await client.get("/page-not-found/")
        assert resp.status_code == 200
        assert resp.text == "<h1>Page not found</h1>"

    async def test_forbidden(self, client):
        resp = await client.get("/forbidden/")
        assert resp.status_code == 200
        assert resp.text == "<h1>Forbidden</h1>"

    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["service"] == "grantdesk"
