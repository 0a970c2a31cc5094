"""
Coupon, gift card and creator code payloads.

Each variant is tagged with the ``kind`` that selects its endpoint, so a body
and a path segment can never disagree:

    coupons        -> {"coupon_code": ...}
    giftcards      -> {"card_number": ...}
    creator-codes  -> {"creator_code": ...}
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

ApplyType = Literal["coupons", "giftcards", "creator-codes"]

APPLY_TYPES = ("coupons", "giftcards", "creator-codes")


class _CodeBody(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"kind"})


class CouponCode(_CodeBody):
    kind: Literal["coupons"] = "coupons"
    coupon_code: str


class GiftCardCode(_CodeBody):
    kind: Literal["giftcards"] = "giftcards"
    card_number: str


class CreatorCode(_CodeBody):
    kind: Literal["creator-codes"] = "creator-codes"
    creator_code: str


BasketCode = Annotated[
    Union[CouponCode, GiftCardCode, CreatorCode],
    Field(discriminator="kind"),
]

_code_adapter: TypeAdapter = TypeAdapter(BasketCode)


def parse_code(kind: str, payload: Mapping[str, Any]) -> Union[CouponCode, GiftCardCode, CreatorCode]:
    """
    Build the code variant selected by ``kind`` from a raw body.

    Raises:
        ValueError: ``payload`` carries a ``kind`` other than ``kind``
        pydantic.ValidationError: unknown kind, or a body that belongs to another kind
    """
    if "kind" in payload and payload["kind"] != kind:
        raise ValueError(f"Payload kind {payload['kind']!r} does not match {kind!r}.")
    return _code_adapter.validate_python({**payload, "kind": kind})
