"""Portal routes: user pages, product detail, subscription grants and videos."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, RedirectResponse
from jinja2 import TemplateError, TemplateNotFound
from pydantic import ValidationError

from grantdesk.accounts.models import SubscriptionTier, User
from grantdesk.accounts.repository import UserRepository
from grantdesk.access.authorization import ContentAccess, authorizer_for
from grantdesk.access.products import (
    AuthorizationKind,
    ProductCatalog,
    display_product_name,
    product_slug,
)
from grantdesk.access.subscriptions import add_subscription
from grantdesk.common.config import GrantdeskSettings, get_settings
from grantdesk.common.exceptions import (
    CatalogDecodeError,
    CatalogReadError,
    GrantdeskError,
    InvalidSubscriptionError,
    ProductNotFoundError,
    StyleNotFoundError,
    UnsupportedGrantError,
    UserNotFoundError,
)
from grantdesk.common.schemas import ErrorDetail, ErrorEnvelope, GrantMessage, SuccessEnvelope
from grantdesk.content.videos import filter_videos, load_videos
from grantdesk.deps import get_product_catalog, get_user_repository
from grantdesk.portal.context import base_context
from grantdesk.portal.schemas import SubscriptionGrantRequest

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_URL = "/page-not-found/"
FORBIDDEN_URL = "/forbidden/"

_ERROR_STATUS = {
    UserNotFoundError: 404,
    ProductNotFoundError: 404,
    StyleNotFoundError: 404,
    InvalidSubscriptionError: 400,
    UnsupportedGrantError: 400,
    CatalogReadError: 400,
    CatalogDecodeError: 400,
}


# ── Helpers ──


def _render(request: Request, name: str, context: dict) -> HTMLResponse | RedirectResponse:
    """Render a template; load failures redirect, render failures answer 500."""
    templates = request.app.state.templates
    try:
        return templates.TemplateResponse(request, name, context)
    except TemplateNotFound as exc:
        logger.error("error occurred when trying to load template %s: %s", name, exc)
        return _redirect(NOT_FOUND_URL)
    except TemplateError:
        logger.exception("error when rendering template %s", name)
        return PlainTextResponse("internal server error", status_code=500)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=302)


def _error_json(exc: GrantdeskError) -> JSONResponse:
    envelope = ErrorEnvelope(error=ErrorDetail(message=exc.message, code=exc.code))
    return JSONResponse(envelope.model_dump(), status_code=_ERROR_STATUS.get(type(exc), 400))


def _user_not_found(user_id: str) -> HTMLResponse:
    logger.info("user %s not found", user_id)
    return HTMLResponse("<h1>User not found</h1>", status_code=404)


def _require_user(users: UserRepository, user_id: str) -> User:
    user = users.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError(f"User {user_id} not found")
    return user


def _parse_grant(body: bytes) -> SubscriptionTier:
    """Decode a ``{"type": "<tier>"}`` body. Unknown tiers are rejected."""
    try:
        return SubscriptionGrantRequest.model_validate_json(body).type
    except ValidationError as exc:
        reasons = "; ".join(err["msg"] for err in exc.errors())
        raise InvalidSubscriptionError(f"invalid body: {reasons}") from exc


# ── Pages ──


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    users: UserRepository = Depends(get_user_repository),
):
    ctx = base_context(request, "Users")
    ctx["users"] = users.list_users()
    return _render(request, "index.html", ctx)


@router.api_route("/", methods=["POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def index_unsupported_method():
    return _redirect(NOT_FOUND_URL)


@router.get("/users/{user_id}/", response_class=HTMLResponse)
async def user_overview(
    request: Request,
    user_id: str,
    users: UserRepository = Depends(get_user_repository),
):
    user = users.find_by_id(user_id)
    if user is None:
        return _user_not_found(user_id)

    ctx = base_context(request, f"User {user.id}")
    ctx["user"] = user
    ctx["products"] = [
        {"name": name, "slug": product_slug(name)} for name in user.product_names()
    ]
    return _render(request, "user_info.html", ctx)


@router.get("/users/{user_id}/products/{product_segment}/", response_class=HTMLResponse)
async def user_product_detail(
    request: Request,
    user_id: str,
    product_segment: str,
    users: UserRepository = Depends(get_user_repository),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    user = users.find_by_id(user_id)
    if user is None:
        return _user_not_found(user_id)

    try:
        product = catalog.resolve(product_segment)
    except ProductNotFoundError as exc:
        logger.info("%s (path segment %r)", exc.message, product_segment)
        return _redirect(NOT_FOUND_URL)

    grants = authorizer_for(product.authorization).grants(user, product.name)
    if grants is None:
        logger.info("user %s has no grants for %s", user.id, product.name)
        return _redirect(NOT_FOUND_URL)

    try:
        style = catalog.style_for(product.name)
    except StyleNotFoundError:
        logger.warning("style not found for product %s", product.name)
        return HTMLResponse("product not found", status_code=404)

    ctx = base_context(request, display_product_name(product_segment))
    ctx.update({
        "user": user,
        "product": product,
        "product_name": product.name,
        "permissions": grants,
        "style": style,
        "can_subscribe": product.authorization is AuthorizationKind.TIER,
        "tiers": [tier.value for tier in SubscriptionTier],
    })
    return _render(request, "user_detail.html", ctx)


@router.patch(
    "/users/{user_id}/products/{product_segment}/",
    response_model=SuccessEnvelope,
    status_code=201,
)
async def grant_subscription(
    request: Request,
    user_id: str,
    product_segment: str,
    users: UserRepository = Depends(get_user_repository),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    try:
        user = _require_user(users, user_id)
        tier = _parse_grant(await request.body())
        product = catalog.resolve(product_segment)
        if product.authorization is not AuthorizationKind.TIER:
            raise UnsupportedGrantError(
                f"{product.name} is authorized by roles and does not accept subscription tiers"
            )
    except GrantdeskError as exc:
        logger.warning("subscription grant rejected for user %s: %s", user_id, exc.message)
        return _error_json(exc)

    tiers = add_subscription(user, product.name, tier)
    names = [t.value for t in tiers]
    return SuccessEnvelope(
        data=GrantMessage(
            message=f"user's permissions [{' '.join(names)}]",
            subscriptions=names,
        )
    )


@router.get("/users/{user_id}/products/{product_segment}/videos/", response_class=HTMLResponse)
async def product_videos(
    request: Request,
    user_id: str,
    product_segment: str,
    users: UserRepository = Depends(get_user_repository),
    catalog: ProductCatalog = Depends(get_product_catalog),
    settings: GrantdeskSettings = Depends(get_settings),
):
    user = users.find_by_id(user_id)
    if user is None:
        return _user_not_found(user_id)

    try:
        product = catalog.resolve(product_segment)
    except ProductNotFoundError as exc:
        logger.info("%s (path segment %r)", exc.message, product_segment)
        return _redirect(NOT_FOUND_URL)

    try:
        videos = load_videos(settings.videos_path, product.name)
    except CatalogReadError as exc:
        return _error_json(exc)
    except CatalogDecodeError as exc:
        return PlainTextResponse(exc.message, status_code=400)

    access = authorizer_for(product.authorization).content_access(user, product.name)
    if access is ContentAccess.NONE:
        logger.info("user %s may not watch %s content", user.id, product.name)
        return _redirect(FORBIDDEN_URL)

    ctx = base_context(request, f"{product.name} videos")
    ctx.update({
        "user": user,
        "product_name": product.name,
        "access": access.value,
        "videos": filter_videos(videos, access),
    })
    return _render(request, "user_videos.html", ctx)


# ── Static pages ──


@router.get("/page-not-found/", response_class=HTMLResponse)
async def page_not_found():
    return HTMLResponse("<h1>Page not found</h1>")


@router.get("/forbidden/", response_class=HTMLResponse)
async def forbidden():
    return HTMLResponse("<h1>Forbidden</h1>")
