from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PackageType(str, Enum):
    SUBSCRIPTION = "subscription"
    SINGLE = "single"
    BOTH = "both"


class DisplayType(str, Enum):
    GRID = "grid"
    LIST = "list"


# ---------------------------------------------------------------------------
# Store resources
# ---------------------------------------------------------------------------

class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class BaseItem(ResponseModel):
    id: int
    name: str


class Package(BaseItem):
    description: str = ""
    type: PackageType
    disable_gifting: bool = False
    disable_quantity: bool = False
    expiration_date: Optional[str] = None
    currency: str
    category: BaseItem
    base_price: float
    sales_tax: float
    total_price: float
    discount: float = 0.0
    image: Optional[str] = None
    created_at: str
    updated_at: str


class Category(BaseItem):
    description: str = ""
    parent: Optional[Category] = None
    order: int = 0
    packages: List[Package] = Field(default_factory=list)   # only filled when includePackages is set
    display_type: DisplayType = DisplayType.LIST
    slug: Optional[str] = None


class Webstore(ResponseModel):
    id: int
    description: str = ""
    name: str
    webstore_url: str
    currency: str
    lang: str
    logo: Optional[str] = None
    platform_type: str
    platform_type_id: Optional[int] = None
    created_at: str


class Page(ResponseModel):
    id: int
    created_at: str
    updated_at: str
    account_id: int
    title: str
    slug: str
    private: bool = False
    hidden: bool = False
    disabled: bool = False
    sequence: int = 0
    content: str = ""


# ---------------------------------------------------------------------------
# Baskets
# ---------------------------------------------------------------------------

class InBasket(ResponseModel):
    quantity: int
    price: float
    gift_username_id: Optional[str] = None
    gift_username: Optional[str] = None


class BasketPackage(BaseItem):
    description: str = ""
    in_basket: InBasket


class Code(ResponseModel):
    code: str


class GiftCard(ResponseModel):
    card_number: str


class Links(ResponseModel):
    checkout: str


class Basket(ResponseModel):
    ident: str
    complete: bool
    id: int
    country: str
    ip: str
    username_id: Optional[str] = None
    username: Optional[str] = None
    cancel_url: str
    complete_url: str
    complete_auto_redirect: bool = False
    base_price: float
    sales_tax: float
    total_price: float
    currency: str
    packages: List[BasketPackage] = Field(default_factory=list)
    coupons: List[Code] = Field(default_factory=list)
    giftcards: List[GiftCard] = Field(default_factory=list)
    creator_code: Optional[str] = None
    links: Links
    custom: Optional[Dict[str, Any]] = None

    @field_validator("custom", mode="before")
    @classmethod
    def _empty_custom_list(cls, value: Any) -> Any:
        # PHP serializes an empty map as []
        if isinstance(value, list) and not value:
            return {}
        return value

    @property
    def checkout_url(self) -> str:
        return self.links.checkout


class AuthUrl(ResponseModel):
    name: str
    url: str


class Message(ResponseModel):
    """Acknowledgment returned by the apply/remove code endpoints."""

    success: bool
    message: str = ""
