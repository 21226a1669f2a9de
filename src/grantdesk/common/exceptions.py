"""Grantdesk exception hierarchy."""


class GrantdeskError(Exception):
    """Base exception for all Grantdesk errors."""

    def __init__(self, message: str = "", code: str = "GRANTDESK_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class UserNotFoundError(GrantdeskError):
    """Raised when no user matches the requested identifier."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, code="USER_NOT_FOUND")


class ProductNotFoundError(GrantdeskError):
    """Raised when a path segment does not name a configured product."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")


class StyleNotFoundError(GrantdeskError):
    """Raised when a product has no style record."""

    def __init__(self, message: str = "Product style not found"):
        super().__init__(message, code="STYLE_NOT_FOUND")


class InvalidSubscriptionError(GrantdeskError):
    """Raised when a subscription request body is malformed or names an unknown tier."""

    def __init__(self, message: str = "Invalid subscription request"):
        super().__init__(message, code="INVALID_SUBSCRIPTION")


class UnsupportedGrantError(GrantdeskError):
    """Raised when tiers are granted on a product that uses roles."""

    def __init__(self, message: str = "Product does not accept subscription tiers"):
        super().__init__(message, code="UNSUPPORTED_GRANT")


class CatalogReadError(GrantdeskError):
    """Raised when a video catalog file cannot be read."""

    def __init__(self, message: str = "Video catalog could not be read"):
        super().__init__(message, code="CATALOG_READ")


class CatalogDecodeError(GrantdeskError):
    """Raised when a video catalog file is not a valid list of videos."""

    def __init__(self, message: str = "Video catalog could not be decoded"):
        super().__init__(message, code="CATALOG_DECODE")
