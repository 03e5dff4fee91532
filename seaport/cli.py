"""Command-line interface.

Usage:
    seaport tokens --symbol WETH
    seaport asset 0x06012c8cf97bead5deae237070f9587f8e7a266d 1
    seaport bundle-sell --account 0x... --price 1.5 --name "Two kitties" \\
        0x06012c8cf97bead5deae237070f9587f8e7a266d:1 0x06012c8cf97bead5deae237070f9587f8e7a266d:2
    seaport bundle-buy --account 0x... --price 0.1 --quantity 1 --quantity 12 \\
        0xc70be5b7c19529ef642d16c10dfe91c58b5c3bf0:4367 0x6524b87960c2d573ae514fd4181777e7842435d4::ERC20

Bundle commands print the unsigned order as JSON; nothing is signed or sent.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from decimal import Decimal

import structlog

from seaport.chain.memory import InMemoryChain
from seaport.config import SeaportConfig
from seaport.constants import NULL_ADDRESS, Network
from seaport.errors import SeaportError
from seaport.log import configure_logging
from seaport.models.asset import Asset, WyvernSchemaName
from seaport.port import OpenSeaPort

logger = structlog.get_logger()


def parse_asset(value: str) -> Asset:
    """Parse ADDRESS[:TOKEN_ID[:SCHEMA]] into an Asset."""
    parts = value.split(":")
    if len(parts) > 3:
        raise argparse.ArgumentTypeError(f"Invalid asset '{value}'")
    address = parts[0]
    token_id = parts[1] if len(parts) > 1 and parts[1] else None
    try:
        schema = WyvernSchemaName(parts[2].upper()) if len(parts) > 2 else None
        return Asset(token_address=address, token_id=token_id, schema_name=schema)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid asset '{value}': {e}") from e


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the seaport command."""
    parser = argparse.ArgumentParser(prog="seaport", description="Wyvern bundle order tools")
    parser.add_argument(
        "--network",
        choices=[n.value for n in Network],
        default=None,
        help="Network to use (default: OPENSEA_NETWORK or main)",
    )
    parser.add_argument("--api-key", default=None, help="Marketplace API key")
    parser.add_argument("--log-level", default="warning", help="Minimum log level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    subparsers = parser.add_subparsers(dest="command", required=True)

    tokens = subparsers.add_parser("tokens", help="List payment tokens")
    tokens.add_argument("--symbol", default=None)
    tokens.add_argument("--address", default=None)

    asset = subparsers.add_parser("asset", help="Show one asset")
    asset.add_argument("token_address")
    asset.add_argument("token_id")

    for name, help_text in (
        ("bundle-buy", "Print an unsigned bundle buy order"),
        ("bundle-sell", "Print an unsigned bundle sell order"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("assets", nargs="+", type=parse_asset, metavar="ASSET")
        command.add_argument("--account", required=True, help="Maker address")
        command.add_argument("--price", required=True, type=Decimal, help="Start price")
        command.add_argument(
            "--quantity",
            action="append",
            type=Decimal,
            default=None,
            help="Quantity per asset, in asset order (default: 1 each)",
        )
        command.add_argument("--expiration", type=int, default=0, help="Unix expiration time")
        command.add_argument("--payment-token", default=None, help="Payment token address")

    sell = subparsers.choices["bundle-sell"]
    sell.add_argument("--name", required=True, help="Bundle name")
    sell.add_argument("--description", default=None, help="Bundle description")
    sell.add_argument("--end-price", type=Decimal, default=None, help="Dutch auction end price")
    sell.add_argument("--bounty", type=int, default=0, help="Extra bounty in basis points")
    sell.add_argument("--buyer", default=NULL_ADDRESS, help="Private buyer address")

    return parser


async def run_command(args: argparse.Namespace, port: OpenSeaPort) -> object:
    """Run a parsed command and return its JSON-serializable result."""
    if args.command == "tokens":
        result = await port.get_payment_tokens(symbol=args.symbol, address=args.address)
        return result.model_dump(mode="json")

    if args.command == "asset":
        asset = await port.get_asset(args.token_address, args.token_id)
        return asset.model_dump(mode="json")

    quantities = args.quantity or [1] * len(args.assets)

    if args.command == "bundle-buy":
        order = await port.make_bundle_buy_order(
            args.assets,
            quantities,
            args.account,
            args.price,
            expiration_time=args.expiration,
            payment_token_address=args.payment_token,
        )
        return order.to_json()

    order = await port.make_bundle_sell_order(
        args.name,
        args.description,
        args.assets,
        quantities,
        args.account,
        args.price,
        end_amount=args.end_price,
        expiration_time=args.expiration,
        payment_token_address=args.payment_token or NULL_ADDRESS,
        extra_bounty_basis_points=args.bounty,
        buyer_address=args.buyer,
    )
    return order.to_json()


async def _main(args: argparse.Namespace) -> object:
    overrides: dict[str, object] = {}
    if args.network is not None:
        overrides["network"] = Network(args.network)
    if args.api_key is not None:
        overrides["api_key"] = args.api_key
    config = SeaportConfig.from_env(**overrides)

    # Orders are only built, so the in-memory chain's clock is all we need
    port = OpenSeaPort(InMemoryChain(), config)
    try:
        return await run_command(args, port)
    finally:
        await port.aclose()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the seaport command."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, json=args.json_logs)

    try:
        result = asyncio.run(_main(args))
    except SeaportError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
