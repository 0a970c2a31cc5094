"""Request bodies for basket operations. Unset optional fields are left out of the JSON."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel

from .models import PackageType


class RequestBody(BaseModel):
    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class CreateBasketBody(RequestBody):
    complete_url: str
    cancel_url: str
    custom: Optional[Dict[str, Any]] = None
    complete_auto_redirect: Optional[bool] = None
    username: Optional[str] = None


class AddPackageBody(RequestBody):
    package_id: int
    quantity: int
    type: PackageType
    variable_data: Optional[Dict[str, Any]] = None


class GiftPackageBody(RequestBody):
    package_id: int
    target_username_id: str


class RemovePackageBody(RequestBody):
    package_id: int


class QuantityBody(RequestBody):
    quantity: int
