"""Shared template context helpers for the portal pages."""

from starlette.requests import Request

NAV_ITEMS = [
    {"label": "Users", "url": "/"},
]


def base_context(request: Request, title: str) -> dict:
    """Build the base template context with page title and nav items."""
    path = request.url.path
    nav = []
    for item in NAV_ITEMS:
        nav.append({
            **item,
            "active": path == item["url"] or (
                item["url"] != "/" and path.startswith(item["url"])
            ),
        })

    return {
        "title": title,
        "nav_items": nav,
    }
