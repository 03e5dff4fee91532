"""Async client for the OpenSea REST API and Wyvern orderbook."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from seaport.config import SeaportConfig
from seaport.constants import API_PATH, ORDERBOOK_PATH
from seaport.errors import APIError
from seaport.models.asset import OpenSeaAsset, OpenSeaAssetContract, PaymentTokenList
from seaport.models.order import Order
from seaport.models.types import normalize_address

logger = structlog.get_logger()


class OpenSeaAPI:
    """Thin async wrapper over the marketplace HTTP API.

    Usage:
        async with OpenSeaAPI(config) as api:
            tokens = await api.get_payment_tokens(symbol="WETH")
    """

    def __init__(
        self,
        config: SeaportConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration. Uses SeaportConfig() if not provided.
            transport: Optional httpx transport (tests pass an httpx.MockTransport)
        """
        self.config = config or SeaportConfig()
        headers = {"Accept": "application/json"}
        if self.config.api_key:
            headers["X-API-KEY"] = self.config.api_key
        self._client = httpx.AsyncClient(
            base_url=self.config.resolved_api_base_url,
            headers=headers,
            timeout=self.config.api_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> OpenSeaAPI:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("api_request_failed", method=method, path=path, error=str(e))
            raise APIError(0, str(e)) from e

        if response.status_code >= 400:
            logger.warning(
                "api_error_response",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise APIError(response.status_code, response.text)

        logger.debug("api_response", method=method, path=path, status_code=response.status_code)
        return response.json()

    async def get_payment_tokens(
        self,
        symbol: str | None = None,
        address: str | None = None,
    ) -> PaymentTokenList:
        """Query payment tokens accepted by the marketplace.

        Args:
            symbol: Filter by token symbol (e.g. "WETH")
            address: Filter by token contract address

        Returns:
            Matching tokens (possibly empty)
        """
        params: dict[str, str] = {}
        if symbol is not None:
            params["symbol"] = symbol
        if address is not None:
            params["address"] = normalize_address(address)
        data = await self._request("GET", f"{API_PATH}/tokens/", params=params)
        # The endpoint returns either a bare list or {"tokens": [...]}
        if isinstance(data, list):
            return PaymentTokenList(tokens=data)
        return PaymentTokenList.model_validate(data)

    async def get_asset(self, token_address: str, token_id: str | int) -> OpenSeaAsset:
        """Fetch one asset with its contract metadata."""
        path = f"{API_PATH}/asset/{normalize_address(token_address)}/{token_id}/"
        return OpenSeaAsset.model_validate(await self._request("GET", path))

    async def get_asset_contract(self, address: str) -> OpenSeaAssetContract:
        """Fetch an asset contract and its fee schedule."""
        path = f"{API_PATH}/asset_contract/{normalize_address(address)}"
        return OpenSeaAssetContract.model_validate(await self._request("GET", path))

    async def post_order(self, order: Order) -> Order:
        """Submit a signed order to the orderbook.

        Returns:
            The order as stored by the orderbook
        """
        data = await self._request("POST", f"{ORDERBOOK_PATH}/orders/post/", json=order.to_json())
        logger.info("order_posted", order_hash=order.hash)
        return Order.model_validate(data)

    async def get_orders(self, **query: Any) -> list[Order]:
        """Query the orderbook.

        Args:
            **query: Orderbook filters (e.g. maker=..., side=1)

        Returns:
            Matching orders
        """
        params = {k: str(v) for k, v in query.items() if v is not None}
        data = await self._request("GET", f"{ORDERBOOK_PATH}/orders", params=params)
        if isinstance(data, dict):
            data = data.get("orders", [])
        return [Order.model_validate(item) for item in data]
