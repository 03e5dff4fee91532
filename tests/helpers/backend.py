"""In-process fake of the marketplace HTTP API, served through httpx.MockTransport.

Usage:
    backend = FakeOpenSeaBackend()
    api = OpenSeaAPI(config, transport=httpx.MockTransport(backend))
"""

import json

import httpx

from tests.helpers.constants import (
    DIGITAL_ART_CHAIN_ADDRESS,
    DIGITAL_ART_CHAIN_TOKEN_ID,
    ENJIN,
    MANA,
    MYTHEREUM_ADDRESS,
    MYTHEREUM_TOKEN_ID,
    WETH,
)

PAYMENT_TOKENS = [
    {"address": WETH, "decimals": 18, "symbol": "WETH", "name": "Wrapped Ether"},
    {"address": MANA, "decimals": 18, "symbol": "MANA", "name": "Decentraland MANA"},
]

MYTHEREUM_CONTRACT = {
    "address": MYTHEREUM_ADDRESS,
    "name": "Mythereum",
    "schema_name": "ERC721",
    "buyer_fee_basis_points": 0,
    "seller_fee_basis_points": 500,
    "opensea_buyer_fee_basis_points": 0,
    "opensea_seller_fee_basis_points": 250,
    "dev_buyer_fee_basis_points": 0,
    "dev_seller_fee_basis_points": 250,
}

DIGITAL_ART_CHAIN_CONTRACT = {
    "address": DIGITAL_ART_CHAIN_ADDRESS,
    "name": "Digital Art Chain",
    "schema_name": "ERC721",
    "buyer_fee_basis_points": 0,
    "seller_fee_basis_points": 250,
    "opensea_buyer_fee_basis_points": 0,
    "opensea_seller_fee_basis_points": 250,
    "dev_buyer_fee_basis_points": 0,
    "dev_seller_fee_basis_points": 0,
}

ENJIN_CONTRACT = {
    "address": ENJIN,
    "name": "Enjin",
    "schema_name": "ERC1155",
    "buyer_fee_basis_points": 0,
    "seller_fee_basis_points": 250,
    "opensea_buyer_fee_basis_points": 0,
    "opensea_seller_fee_basis_points": 250,
    "dev_buyer_fee_basis_points": 0,
    "dev_seller_fee_basis_points": 0,
}

ASSETS = {
    (MYTHEREUM_ADDRESS, str(MYTHEREUM_TOKEN_ID)): {
        "token_id": str(MYTHEREUM_TOKEN_ID),
        "asset_contract": MYTHEREUM_CONTRACT,
        "name": "Mythereum card",
    },
    (DIGITAL_ART_CHAIN_ADDRESS, str(DIGITAL_ART_CHAIN_TOKEN_ID)): {
        "token_id": str(DIGITAL_ART_CHAIN_TOKEN_ID),
        "asset_contract": DIGITAL_ART_CHAIN_CONTRACT,
        "name": "Digital Art Chain piece",
    },
}


class FakeOpenSeaBackend:
    """Request handler answering the endpoints OpenSeaAPI calls.

    Records every request and every posted order for assertions.
    """

    def __init__(self) -> None:
        self.payment_tokens = list(PAYMENT_TOKENS)
        self.contracts = {
            MYTHEREUM_ADDRESS: MYTHEREUM_CONTRACT,
            DIGITAL_ART_CHAIN_ADDRESS: DIGITAL_ART_CHAIN_CONTRACT,
            ENJIN: ENJIN_CONTRACT,
        }
        self.assets = dict(ASSETS)
        self.requests: list[httpx.Request] = []
        self.posted_orders: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        parts = [p for p in path.split("/") if p]

        if path == "/api/v1/tokens/":
            return httpx.Response(200, json={"tokens": self._filter_tokens(request)})

        if parts[:3] == ["api", "v1", "asset_contract"] and len(parts) == 4:
            contract = self.contracts.get(parts[3])
            if contract is None:
                return httpx.Response(404, json={"detail": "Not found."})
            return httpx.Response(200, json=contract)

        if parts[:3] == ["api", "v1", "asset"] and len(parts) == 5:
            asset = self.assets.get((parts[3], parts[4]))
            if asset is None:
                return httpx.Response(404, json={"detail": "Not found."})
            return httpx.Response(200, json=asset)

        if path == "/wyvern/v1/orders/post/" and request.method == "POST":
            body = json.loads(request.content)
            self.posted_orders.append(body)
            return httpx.Response(201, json=body)

        if path == "/wyvern/v1/orders":
            maker = request.url.params.get("maker")
            orders = [o for o in self.posted_orders if maker is None or o["maker"] == maker]
            return httpx.Response(200, json={"count": len(orders), "orders": orders})

        return httpx.Response(404, json={"detail": "Not found."})

    def _filter_tokens(self, request: httpx.Request) -> list[dict]:
        symbol = request.url.params.get("symbol")
        address = request.url.params.get("address")
        return [
            token
            for token in self.payment_tokens
            if (symbol is None or token["symbol"] == symbol)
            and (address is None or token["address"] == address)
        ]
