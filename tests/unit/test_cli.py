"""Tests for the command-line interface."""

import argparse
import json
from decimal import Decimal

import pytest

from seaport import cli
from seaport.errors import OrderValidationError
from seaport.models import WyvernSchemaName
from tests.helpers import (
    ALEX_ADDRESS,
    BENZENE_ADDRESS,
    DIGITAL_ART_CHAIN_ADDRESS,
    DIGITAL_ART_CHAIN_TOKEN_ID,
    MYTHEREUM_ADDRESS,
    MYTHEREUM_TOKEN_ID,
    WETH,
)

MYTHEREUM_ARG = f"{MYTHEREUM_ADDRESS}:{MYTHEREUM_TOKEN_ID}"
DIGITAL_ART_CHAIN_ARG = f"{DIGITAL_ART_CHAIN_ADDRESS}:{DIGITAL_ART_CHAIN_TOKEN_ID}"


class TestParseAsset:
    def test_token_with_id(self):
        asset = cli.parse_asset(MYTHEREUM_ARG)
        assert asset.token_address == MYTHEREUM_ADDRESS
        assert asset.token_id == str(MYTHEREUM_TOKEN_ID)
        assert asset.schema_name is None

    def test_fungible_with_schema(self):
        asset = cli.parse_asset(f"{BENZENE_ADDRESS}::erc20")
        assert asset.token_id is None
        assert asset.schema_name == WyvernSchemaName.ERC20

    @pytest.mark.parametrize(
        "value",
        [
            "0xnothex:1",
            f"{MYTHEREUM_ADDRESS}:1:ERC999",
            f"{MYTHEREUM_ADDRESS}:1:ERC721:extra",
        ],
    )
    def test_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid asset"):
            cli.parse_asset(value)


class TestParser:
    def test_bundle_sell_arguments(self):
        args = cli.build_parser().parse_args(
            [
                "--network",
                "rinkeby",
                "bundle-sell",
                "--account",
                ALEX_ADDRESS,
                "--price",
                "1.5",
                "--name",
                "Pair",
                "--bounty",
                "50",
                MYTHEREUM_ARG,
                DIGITAL_ART_CHAIN_ARG,
            ]
        )
        assert args.network == "rinkeby"
        assert args.command == "bundle-sell"
        assert args.price == Decimal("1.5")
        assert args.bounty == 50
        assert len(args.assets) == 2
        assert args.quantity is None

    def test_quantities_append(self):
        args = cli.build_parser().parse_args(
            [
                "bundle-buy",
                "--account",
                ALEX_ADDRESS,
                "--price",
                "1",
                "--quantity",
                "1",
                "--quantity",
                "12",
                MYTHEREUM_ARG,
                f"{BENZENE_ADDRESS}::ERC20",
            ]
        )
        assert args.quantity == [Decimal(1), Decimal(12)]

    def test_sell_requires_name(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(
                ["bundle-sell", "--account", ALEX_ADDRESS, "--price", "1", MYTHEREUM_ARG]
            )


class TestRunCommand:
    @pytest.mark.asyncio
    async def test_tokens(self, port):
        args = cli.build_parser().parse_args(["tokens", "--symbol", "WETH"])
        result = await cli.run_command(args, port)
        assert [t["address"] for t in result["tokens"]] == [WETH]

    @pytest.mark.asyncio
    async def test_asset(self, port):
        args = cli.build_parser().parse_args(
            ["asset", MYTHEREUM_ADDRESS, str(MYTHEREUM_TOKEN_ID)]
        )
        result = await cli.run_command(args, port)
        assert result["name"] == "Mythereum card"

    @pytest.mark.asyncio
    async def test_bundle_sell(self, port):
        args = cli.build_parser().parse_args(
            [
                "bundle-sell",
                "--account",
                ALEX_ADDRESS,
                "--price",
                "1",
                "--name",
                "Pair",
                MYTHEREUM_ARG,
                DIGITAL_ART_CHAIN_ARG,
            ]
        )
        result = await cli.run_command(args, port)

        assert result["side"] == 1
        assert result["maker"] == ALEX_ADDRESS
        assert result["basePrice"] == str(10**18)
        assert result["metadata"]["bundle"]["name"] == "Pair"
        assert len(result["metadata"]["bundle"]["assets"]) == 2
        assert "v" not in result

    @pytest.mark.asyncio
    async def test_bundle_buy_defaults_to_weth(self, port):
        args = cli.build_parser().parse_args(
            ["bundle-buy", "--account", ALEX_ADDRESS, "--price", "0.1", MYTHEREUM_ARG]
        )
        result = await cli.run_command(args, port)

        assert result["side"] == 0
        assert result["paymentToken"] == WETH
        assert result["basePrice"] == str(10**17)


class TestMain:
    def test_prints_json(self, monkeypatch, capsys):
        async def fake_main(args):
            return {"command": args.command}

        monkeypatch.setattr(cli, "_main", fake_main)

        assert cli.main(["tokens"]) == 0
        assert json.loads(capsys.readouterr().out) == {"command": "tokens"}

    def test_reports_errors(self, monkeypatch, capsys):
        async def fake_main(args):
            raise OrderValidationError("Offers must use wrapped ETH or an ERC-20 token.")

        monkeypatch.setattr(cli, "_main", fake_main)

        assert cli.main(["tokens"]) == 1
        assert "error: Offers must use wrapped ETH" in capsys.readouterr().err

    def test_invalid_account_is_reported_not_raised(self, capsys):
        """A malformed --account is a usage error, not a crash."""
        exit_code = cli.main(
            ["bundle-sell", "--account", "0xbad", "--price", "1", MYTHEREUM_ARG]
        )

        assert exit_code == 1
        assert "error: Invalid address: 0xbad" in capsys.readouterr().err
