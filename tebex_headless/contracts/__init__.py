"""
Contracts (data models).

Request and response shapes for the Tebex Headless API:
- resources returned inside a ``{"data": ...}`` envelope (baskets, categories, packages, ...)
- acknowledgments returned by the apply/remove code endpoints
- request bodies sent by the basket operations

Response models accept unknown keys so new remote fields do not break parsing.
"""

from .codes import (
    APPLY_TYPES,
    ApplyType,
    BasketCode,
    CouponCode,
    CreatorCode,
    GiftCardCode,
    parse_code,
)
from .models import (
    AuthUrl,
    BaseItem,
    Basket,
    BasketPackage,
    Category,
    Code,
    DisplayType,
    GiftCard,
    InBasket,
    Links,
    Message,
    Package,
    PackageType,
    Page,
    Webstore,
)
from .requests import (
    AddPackageBody,
    CreateBasketBody,
    GiftPackageBody,
    QuantityBody,
    RemovePackageBody,
)

__all__ = [
    # codes
    "APPLY_TYPES", "ApplyType", "BasketCode", "CouponCode", "CreatorCode",
    "GiftCardCode", "parse_code",
    # models
    "AuthUrl", "BaseItem", "Basket", "BasketPackage", "Category", "Code",
    "DisplayType", "GiftCard", "InBasket", "Links", "Message", "Package",
    "PackageType", "Page", "Webstore",
    # request bodies
    "AddPackageBody", "CreateBasketBody", "GiftPackageBody", "QuantityBody",
    "RemovePackageBody",
]
