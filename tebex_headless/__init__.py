"""
Typed async client for the Tebex Headless storefront API.

    from tebex_headless import TebexHeadless, CouponCode

    headless = TebexHeadless(webstore_identifier="abcd-1234")
    categories = await headless.get_categories(include_packages=True)
    basket = await headless.create_basket("https://shop/ok", "https://shop/cancel")
    await headless.apply(basket.ident, CouponCode(coupon_code="SUMMER10"))

Credentials live on the client instance; there is no module-level state.
"""

from .clients import BASE_URL, HeadlessHttpClient, Route, TebexHeadless, normalize_params
from .contracts import (
    APPLY_TYPES,
    AddPackageBody,
    ApplyType,
    AuthUrl,
    BaseItem,
    Basket,
    BasketCode,
    BasketPackage,
    Category,
    Code,
    CouponCode,
    CreateBasketBody,
    CreatorCode,
    DisplayType,
    GiftCard,
    GiftCardCode,
    GiftPackageBody,
    InBasket,
    Links,
    Message,
    Package,
    PackageType,
    Page,
    QuantityBody,
    RemovePackageBody,
    Webstore,
    parse_code,
)
from .errors import (
    HeadlessAPIError,
    HeadlessConfigurationError,
    HeadlessError,
    HeadlessResponseError,
    describe_error,
)
from .utils.config_loader import HeadlessConfig, headless_config_from_env, load_headless_config

__version__ = "0.1.0"

__all__ = [
    # clients
    "BASE_URL", "HeadlessHttpClient", "Route", "TebexHeadless", "normalize_params",
    # contracts
    "APPLY_TYPES", "ApplyType", "AuthUrl", "BaseItem", "Basket", "BasketCode",
    "BasketPackage", "Category", "Code", "CouponCode", "CreatorCode", "DisplayType",
    "GiftCard", "GiftCardCode", "InBasket", "Links", "Message", "Package",
    "PackageType", "Page", "Webstore", "parse_code",
    "AddPackageBody", "CreateBasketBody", "GiftPackageBody", "QuantityBody", "RemovePackageBody",
    # errors
    "HeadlessAPIError", "HeadlessConfigurationError", "HeadlessError",
    "HeadlessResponseError", "describe_error",
    # config
    "HeadlessConfig", "headless_config_from_env", "load_headless_config",
]
