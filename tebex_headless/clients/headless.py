"""
Tebex Headless API client.

Each method is one endpoint: fixed HTTP method, fixed path, a fixed mapping
from its arguments to query params / body fields. Resource fetches unwrap the
``{"data": ...}`` envelope; code apply/remove return the ``{success, message}``
acknowledgment as-is.

Usage:
    headless = TebexHeadless(webstore_identifier="abcd-1234", private_key="...")
    basket = await headless.create_basket("https://shop/ok", "https://shop/cancel")
    basket = await headless.add_package_to_basket(basket.ident, 42, 1, "single")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from tebex_headless.clients.http import BASE_URL, HeadlessHttpClient, Route
from tebex_headless.clients.response_wrappers import parse_model, parse_model_list, unwrap_data
from tebex_headless.contracts.codes import BasketCode
from tebex_headless.contracts.models import (
    AuthUrl,
    Basket,
    Category,
    Message,
    Package,
    PackageType,
    Page,
    Webstore,
)
from tebex_headless.contracts.requests import (
    AddPackageBody,
    CreateBasketBody,
    GiftPackageBody,
    QuantityBody,
    RemovePackageBody,
)
from tebex_headless.utils.config_loader import HeadlessConfig

logger = logging.getLogger(__name__)


class TebexHeadless:
    def __init__(
        self,
        webstore_identifier: Optional[str] = None,
        private_key: Optional[str] = None,
        base_url: str = BASE_URL,
        timeout_seconds: float = 20.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.http = HeadlessHttpClient(
            webstore_identifier=webstore_identifier,
            private_key=private_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            http_client=http_client,
        )

    @classmethod
    def from_config(cls, config: HeadlessConfig, http_client: Optional[httpx.AsyncClient] = None) -> "TebexHeadless":
        logger.info(
            "Tebex Headless client for webstore %s at %s (%s)",
            config.webstore_identifier,
            config.base_url,
            "authenticated" if config.authenticated else "public",
        )
        return cls(
            webstore_identifier=config.webstore_identifier,
            private_key=config.private_key,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            http_client=http_client,
        )

    # -- Credentials --

    @property
    def webstore_identifier(self) -> Optional[str]:
        return self.http.webstore_identifier

    def set_webstore_identifier(self, identifier: Optional[str]) -> None:
        self.http.set_webstore_identifier(identifier)

    def set_private_key(self, key: Optional[str]) -> None:
        self.http.set_private_key(key)

    async def _store_data(self, method: str, path: Optional[str] = None, params: Optional[Dict[str, Any]] = None, body: Any = None) -> Any:
        raw = await self.http.request(method, self.webstore_identifier, Route.ACCOUNTS, path, params, body)
        return unwrap_data(raw)

    async def _basket_data(self, basket_ident: str, method: str, path: str, body: Any) -> Basket:
        raw = await self.http.request(method, basket_ident, Route.BASKETS, path, None, body)
        return parse_model(Basket, unwrap_data(raw))

    # -- Webstore --

    async def get_webstore(self) -> Webstore:
        return parse_model(Webstore, await self._store_data("GET"))

    async def get_pages(self) -> List[Page]:
        return parse_model_list(Page, await self._store_data("GET", "/pages"))

    # -- Categories --

    async def get_categories(
        self,
        include_packages: Optional[bool] = None,
        basket_ident: Optional[str] = None,
        ip_address: Optional[str] = None,
    ) -> List[Category]:
        data = await self._store_data("GET", "/categories", {
            "includePackages": include_packages,
            "basketIdent": basket_ident,
            "ipAddress": ip_address,
        })
        return parse_model_list(Category, data)

    async def get_category(
        self,
        category_id: int,
        include_packages: Optional[bool] = None,
        basket_ident: Optional[str] = None,
        ip_address: Optional[str] = None,
    ) -> Category:
        data = await self._store_data("GET", f"/categories/{category_id}", {
            "includePackages": include_packages,
            "basketIdent": basket_ident,
            "ipAddress": ip_address,
        })
        return parse_model(Category, data)

    # -- Packages --

    async def get_packages(self, basket_ident: Optional[str] = None, ip_address: Optional[str] = None) -> List[Package]:
        data = await self._store_data("GET", "/packages", {
            "basketIdent": basket_ident,
            "ipAddress": ip_address,
        })
        return parse_model_list(Package, data)

    async def get_package(self, package_id: int, basket_ident: Optional[str] = None, ip_address: Optional[str] = None) -> Package:
        data = await self._store_data("GET", f"/packages/{package_id}", {
            "basketIdent": basket_ident,
            "ipAddress": ip_address,
        })
        return parse_model(Package, data)

    # -- Baskets --

    async def get_basket(self, basket_ident: str) -> Basket:
        return parse_model(Basket, await self._store_data("GET", f"/baskets/{basket_ident}"))

    async def create_basket(
        self,
        complete_url: str,
        cancel_url: str,
        custom: Optional[Dict[str, Any]] = None,
        complete_auto_redirect: Optional[bool] = None,
        ip_address: Optional[str] = None,
    ) -> Basket:
        body = CreateBasketBody(
            complete_url=complete_url,
            cancel_url=cancel_url,
            custom=custom,
            complete_auto_redirect=complete_auto_redirect,
        )
        data = await self._store_data("POST", "/baskets", {"ip_address": ip_address}, body.to_body())
        return parse_model(Basket, data)

    async def create_minecraft_basket(
        self,
        username: str,
        complete_url: str,
        cancel_url: str,
        custom: Optional[Dict[str, Any]] = None,
        complete_auto_redirect: Optional[bool] = None,
        ip_address: Optional[str] = None,
    ) -> Basket:
        """Create a basket tied to a Minecraft username. The server resolves (and re-cases) the name."""
        body = CreateBasketBody(
            username=username,
            complete_url=complete_url,
            cancel_url=cancel_url,
            custom=custom,
            complete_auto_redirect=complete_auto_redirect,
        )
        data = await self._store_data("POST", "/baskets", {"ip_address": ip_address}, body.to_body())
        return parse_model(Basket, data)

    async def get_basket_auth_url(self, basket_ident: str, return_url: str) -> List[AuthUrl]:
        # This endpoint answers with a bare list, not a data envelope.
        raw = await self.http.request(
            "GET", self.webstore_identifier, Route.ACCOUNTS, f"/baskets/{basket_ident}/auth", {"returnUrl": return_url}
        )
        return parse_model_list(AuthUrl, raw)

    async def add_package_to_basket(
        self,
        basket_ident: str,
        package_id: int,
        quantity: int,
        type: Union[PackageType, str],
        variable_data: Optional[Dict[str, Any]] = None,
    ) -> Basket:
        body = AddPackageBody(package_id=package_id, quantity=quantity, type=type, variable_data=variable_data)
        return await self._basket_data(basket_ident, "POST", "/packages", body.to_body())

    async def gift_package(self, basket_ident: str, package_id: int, target_username_id: str) -> Basket:
        body = GiftPackageBody(package_id=package_id, target_username_id=target_username_id)
        return await self._basket_data(basket_ident, "POST", "/packages", body.to_body())

    async def remove_package(self, basket_ident: str, package_id: int) -> Basket:
        body = RemovePackageBody(package_id=package_id)
        return await self._basket_data(basket_ident, "POST", "/packages/remove", body.to_body())

    async def update_quantity(self, basket_ident: str, package_id: int, quantity: int) -> Basket:
        body = QuantityBody(quantity=quantity)
        return await self._basket_data(basket_ident, "PUT", f"/packages/{package_id}", body.to_body())

    # -- Coupons, gift cards, creator codes --

    async def apply(self, basket_ident: str, code: BasketCode) -> Message:
        raw = await self.http.request(
            "POST", self.webstore_identifier, Route.ACCOUNTS, f"/baskets/{basket_ident}/{code.kind}", None, code.to_body()
        )
        return parse_model(Message, raw)

    async def remove(self, basket_ident: str, code: BasketCode) -> Message:
        raw = await self.http.request(
            "POST", self.webstore_identifier, Route.ACCOUNTS, f"/baskets/{basket_ident}/{code.kind}/remove", None, code.to_body()
        )
        return parse_model(Message, raw)
