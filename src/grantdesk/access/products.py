"""Product configuration, button styles and path-segment normalization.

Products are keyed by their compact name (``Product1``). URL path segments
arrive lower-cased and hyphenated (``product-1``) and are normalized in two
steps: first to a display name (``Product 1``), then to the compact key.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from grantdesk.common.exceptions import ProductNotFoundError, StyleNotFoundError


class AuthorizationKind(str, Enum):
    """Which grant map a product is authorized against."""

    TIER = "tier"
    ROLE = "role"


@dataclass(frozen=True)
class ProductStyle:
    button_bg: str
    button: str


@dataclass(frozen=True)
class ProductConfig:
    name: str
    authorization: AuthorizationKind

    @property
    def slug(self) -> str:
        return product_slug(self.name)


# ── Seed catalog ──

PRODUCTS = [
    ProductConfig("Product1", AuthorizationKind.TIER),
    ProductConfig("Product2", AuthorizationKind.TIER),
    ProductConfig("Backoffice", AuthorizationKind.ROLE),
]

PRODUCT_STYLES = {
    "Product1": ProductStyle(button_bg="yellow", button="black"),
    "Product2": ProductStyle(button_bg="purple", button="green"),
    "Backoffice": ProductStyle(button_bg="teal", button="white"),
}


# ── Normalization ──


def display_product_name(segment: str) -> str:
    """Turn a path segment into a display name.

    Hyphens become spaces and the first letter of every word is upper-cased.
    The rest of each word is left as-is, so ``product1`` stays ``Product1``.
    """
    words = segment.replace("-", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def product_key(display_name: str) -> str:
    """Compact a display name into the key grants and styles are stored under."""
    return display_name.replace(" ", "")


def product_slug(name: str) -> str:
    return product_key(name).lower()


class ProductCatalog:
    """Lookup of configured products and their styles."""

    def __init__(
        self,
        products: Iterable[ProductConfig],
        styles: Optional[dict[str, ProductStyle]] = None,
    ):
        self._products = {p.name: p for p in products}
        self._styles = dict(styles or {})

    def get(self, name: str) -> ProductConfig:
        product = self._products.get(name)
        if product is None:
            raise ProductNotFoundError(f"Unknown product: {name}")
        return product

    def resolve(self, segment: str) -> ProductConfig:
        """Resolve a URL path segment (``product-1``) to a product."""
        return self.get(product_key(display_product_name(segment)))

    def style_for(self, name: str) -> ProductStyle:
        style = self._styles.get(name)
        if style is None:
            raise StyleNotFoundError(f"No style configured for product {name}")
        return style

    def list_products(self) -> list[ProductConfig]:
        return list(self._products.values())


def default_catalog() -> ProductCatalog:
    return ProductCatalog(PRODUCTS, PRODUCT_STYLES)
