"""OpenSeaPort: build, approve, sign and post bundle orders."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

import structlog

from seaport.api import OpenSeaAPI
from seaport.bundles import (
    get_wyvern_bundle,
    is_homogeneous,
    quantities_to_base_units,
    schemas_for_assets,
)
from seaport.chain.base import ChainClient
from seaport.config import SeaportConfig
from seaport.constants import MAX_UINT_256, NULL_ADDRESS, OPENSEA_FEE_RECIPIENT
from seaport.encoding import (
    CallEncoding,
    encode_atomicized_buy,
    encode_atomicized_sell,
    encode_buy,
    encode_sell,
)
from seaport.errors import (
    ApprovalError,
    InsufficientBalanceError,
    OrderMatchError,
    OrderValidationError,
    OwnershipError,
)
from seaport.exchange import (
    calculate_final_price,
    check_orders_match,
    validate_order_parameters,
)
from seaport.fees import ComputedFees, DefaultFeeCalculator
from seaport.hashing import generate_pseudo_random_salt, get_order_hash, hash_order
from seaport.models.asset import (
    Asset,
    OpenSeaAsset,
    OpenSeaAssetContract,
    PaymentToken,
    PaymentTokenList,
    WyvernAsset,
    WyvernSchemaName,
)
from seaport.models.order import (
    HowToCall,
    Order,
    OrderMetadata,
    OrderSide,
    SaleKind,
    UnhashedOrder,
)
from seaport.models.types import normalize_address, validate_account_address
from seaport.pricing import Amount, get_price_parameters, get_time_parameters
from seaport.schemas import Schema, get_schema

logger = structlog.get_logger()


class OpenSeaPort:
    """Client for trading bundles on the Wyvern exchange.

    Orders are built locally, approved on-chain through the ChainClient
    and posted through the marketplace API.

    Usage:
        port = OpenSeaPort(chain, SeaportConfig.from_env())
        order = await port.make_bundle_sell_order(
            "My bundle", "Two kitties", assets, [1, 1], account, start_amount=1
        )
        await port.sell_order_validation_and_approvals(order, account)
    """

    def __init__(
        self,
        chain: ChainClient,
        config: SeaportConfig | None = None,
        api: OpenSeaAPI | None = None,
        fee_calculator: DefaultFeeCalculator | None = None,
    ):
        """Initialize the client.

        Args:
            chain: Chain access for balances, approvals and signing
            config: Client configuration. Uses SeaportConfig() if not provided.
            api: Marketplace API client. Built from config if not provided.
            fee_calculator: Fee calculator. Uses the configured fee defaults if not provided.
        """
        self.config = config or SeaportConfig()
        self.chain = chain
        self.api = api or OpenSeaAPI(self.config)
        self.fee_calculator = fee_calculator or DefaultFeeCalculator(self.config.fees)

    @classmethod
    def from_config(cls, config: SeaportConfig | None = None) -> OpenSeaPort:
        """Create a client that talks to the configured JSON-RPC endpoint."""
        from seaport.chain.rpc import RpcChainClient

        config = config or SeaportConfig.from_env()
        return cls(RpcChainClient(config), config)

    async def aclose(self) -> None:
        """Release the HTTP client."""
        await self.api.aclose()

    # Marketplace queries

    async def get_payment_tokens(
        self, symbol: str | None = None, address: str | None = None
    ) -> PaymentTokenList:
        """Payment tokens accepted by the marketplace, filtered by symbol or address."""
        return await self.api.get_payment_tokens(symbol=symbol, address=address)

    async def get_asset(self, token_address: str, token_id: str | int) -> OpenSeaAsset:
        """Asset metadata, including its contract's fee schedule."""
        return await self.api.get_asset(token_address, token_id)

    async def _get_payment_token(self, address: str) -> PaymentToken | None:
        if address == NULL_ADDRESS:
            return None
        tokens = await self.api.get_payment_tokens(address=address)
        return tokens.tokens[0] if tokens.tokens else None

    async def _homogeneous_contract(self, assets: Sequence[Asset]) -> OpenSeaAssetContract | None:
        if not is_homogeneous(assets):
            return None
        return await self.api.get_asset_contract(assets[0].token_address)

    # Fees

    async def compute_fees(
        self,
        side: OrderSide,
        assets: Sequence[Asset] = (),
        extra_bounty_basis_points: int = 0,
        is_private: bool = False,
        asset_contract: OpenSeaAssetContract | None = None,
    ) -> ComputedFees:
        """Fees for an order over the given assets.

        A homogeneous bundle pays its contract's fee schedule; any other
        bundle pays the configured defaults.

        Args:
            side: Order side
            assets: Assets in the order
            extra_bounty_basis_points: Bounty the seller offers to referrers
            is_private: Whether the order is reserved for one buyer
            asset_contract: Fee schedule to use instead of looking one up

        Returns:
            ComputedFees for the order
        """
        if asset_contract is None:
            asset_contract = await self._homogeneous_contract(assets)
        return self.fee_calculator.compute_fees(
            side,
            asset_contract=asset_contract,
            extra_bounty_basis_points=extra_bounty_basis_points,
            is_private=is_private,
        )

    # Order construction

    async def make_bundle_buy_order(
        self,
        assets: Sequence[Asset],
        quantities: Sequence[int | float | str | Decimal],
        account_address: str,
        start_amount: Amount,
        expiration_time: int = 0,
        payment_token_address: str | None = None,
        extra_bounty_basis_points: int = 0,
        sell_order: UnhashedOrder | None = None,
        referrer_address: str | None = None,
    ) -> UnhashedOrder:
        """Build an unsigned offer on a bundle of assets.

        Args:
            assets: Assets to buy
            quantities: Quantity of each asset, in whole units
            account_address: Buyer
            start_amount: Offer price in whole payment-token units
            expiration_time: Offer expiration (0 = never)
            payment_token_address: Token to pay with (defaults to WETH)
            extra_bounty_basis_points: Referrer bounty (only charged on sell orders)
            sell_order: Sell order this offer targets, if any
            referrer_address: Referrer credited in the order metadata

        Returns:
            The unsigned buy order

        Raises:
            OrderValidationError: If any order parameter is invalid
        """
        account = validate_account_address(account_address)
        payment_token_address = normalize_address(
            payment_token_address or self.config.weth_address
        )

        bundle = get_wyvern_bundle(
            assets, schemas_for_assets(assets), quantities_to_base_units(assets, quantities)
        )
        fees = await self.compute_fees(
            OrderSide.BUY, assets, extra_bounty_basis_points=extra_bounty_basis_points
        )
        fee_parameters = self.fee_calculator.get_buy_fee_parameters(
            fees.total_buyer_fee_basis_points,
            fees.total_seller_fee_basis_points,
            sell_order,
        )
        encoding = encode_atomicized_buy(
            [get_schema(name) for name in bundle.schemas],
            bundle.assets,
            account,
            self.config.network,
        )

        now = await self.chain.get_block_timestamp()
        times = get_time_parameters(expiration_time, now=now)
        prices = get_price_parameters(
            OrderSide.BUY,
            payment_token_address,
            await self._get_payment_token(payment_token_address),
            expiration_time,
            start_amount,
        )

        order = UnhashedOrder(
            exchange=self.config.exchange_address,
            maker=account,
            taker=normalize_address(sell_order.maker) if sell_order else NULL_ADDRESS,
            quantity=1,
            maker_relayer_fee=fee_parameters.maker_relayer_fee,
            taker_relayer_fee=fee_parameters.taker_relayer_fee,
            maker_protocol_fee=fee_parameters.maker_protocol_fee,
            taker_protocol_fee=fee_parameters.taker_protocol_fee,
            maker_referrer_fee=fee_parameters.maker_referrer_fee,
            waiting_for_best_counter_order=False,
            fee_method=fee_parameters.fee_method,
            fee_recipient=fee_parameters.fee_recipient,
            side=OrderSide.BUY,
            sale_kind=SaleKind.FIXED_PRICE,
            target=encoding.target,
            how_to_call=HowToCall.DELEGATE_CALL,
            calldata=encoding.calldata,
            replacement_pattern=encoding.replacement_pattern,
            payment_token=prices.payment_token,
            base_price=prices.base_price,
            extra=prices.extra,
            listing_time=times.listing_time,
            expiration_time=times.expiration_time,
            salt=generate_pseudo_random_salt(),
            metadata=OrderMetadata(
                bundle=bundle,
                referrer_address=(
                    normalize_address(referrer_address) if referrer_address else None
                ),
            ),
        )
        logger.debug(
            "bundle_buy_order_built",
            maker=account,
            asset_count=len(bundle.assets),
            base_price=order.base_price,
        )
        return order

    async def make_bundle_sell_order(
        self,
        bundle_name: str,
        bundle_description: str | None,
        assets: Sequence[Asset],
        quantities: Sequence[int | float | str | Decimal],
        account_address: str,
        start_amount: Amount,
        end_amount: Amount | None = None,
        expiration_time: int = 0,
        listing_time: int | None = None,
        wait_for_highest_bid: bool = False,
        english_auction_reserve_price: Amount | None = None,
        payment_token_address: str = NULL_ADDRESS,
        extra_bounty_basis_points: int = 0,
        buyer_address: str = NULL_ADDRESS,
        bundle_external_link: str | None = None,
    ) -> UnhashedOrder:
        """Build an unsigned listing for a bundle of assets.

        An end amount different from the start amount makes a Dutch
        auction; wait_for_highest_bid makes an English auction; a buyer
        address makes a private, fee-free sale to that buyer.

        Args:
            bundle_name: Name shown for the bundle
            bundle_description: Description shown for the bundle
            assets: Assets to sell
            quantities: Quantity of each asset, in whole units
            account_address: Seller
            start_amount: Listing price in whole payment-token units
            end_amount: Final price of a Dutch auction
            expiration_time: Listing expiration (0 = never)
            listing_time: Scheduled listing time (defaults to now)
            wait_for_highest_bid: Run an English auction
            english_auction_reserve_price: Minimum winning bid
            payment_token_address: Token to be paid in (null address = ether)
            extra_bounty_basis_points: Bounty offered to referrers
            buyer_address: Only this account may buy (null address = anyone)
            bundle_external_link: Link shown for the bundle

        Returns:
            The unsigned sell order

        Raises:
            OrderValidationError: If any order parameter is invalid
        """
        account = validate_account_address(account_address)
        payment_token_address = normalize_address(payment_token_address)
        buyer = normalize_address(buyer_address)

        bundle = get_wyvern_bundle(
            assets, schemas_for_assets(assets), quantities_to_base_units(assets, quantities)
        ).model_copy(
            update={
                "name": bundle_name,
                "description": bundle_description,
                "external_link": bundle_external_link,
            }
        )
        fees = await self.compute_fees(
            OrderSide.SELL,
            assets,
            extra_bounty_basis_points=extra_bounty_basis_points,
            is_private=buyer != NULL_ADDRESS,
        )
        fee_parameters = self.fee_calculator.get_sell_fee_parameters(
            fees.total_buyer_fee_basis_points,
            fees.total_seller_fee_basis_points,
            wait_for_highest_bid,
            fees.seller_bounty_basis_points,
        )
        encoding = encode_atomicized_sell(
            [get_schema(name) for name in bundle.schemas],
            bundle.assets,
            account,
            self.config.network,
        )

        now = await self.chain.get_block_timestamp()
        times = get_time_parameters(
            expiration_time,
            waiting_for_best_counter_order=wait_for_highest_bid,
            listing_time=listing_time,
            now=now,
        )
        prices = get_price_parameters(
            OrderSide.SELL,
            payment_token_address,
            await self._get_payment_token(payment_token_address),
            expiration_time,
            start_amount,
            end_amount=end_amount,
            waiting_for_best_counter_order=wait_for_highest_bid,
            english_auction_reserve_price=english_auction_reserve_price,
        )

        order = UnhashedOrder(
            exchange=self.config.exchange_address,
            maker=account,
            taker=buyer,
            quantity=1,
            maker_relayer_fee=fee_parameters.maker_relayer_fee,
            taker_relayer_fee=fee_parameters.taker_relayer_fee,
            maker_protocol_fee=fee_parameters.maker_protocol_fee,
            taker_protocol_fee=fee_parameters.taker_protocol_fee,
            maker_referrer_fee=fee_parameters.maker_referrer_fee,
            waiting_for_best_counter_order=wait_for_highest_bid,
            english_auction_reserve_price=prices.reserve_price,
            fee_method=fee_parameters.fee_method,
            fee_recipient=fee_parameters.fee_recipient,
            side=OrderSide.SELL,
            sale_kind=SaleKind.DUTCH_AUCTION if prices.extra > 0 else SaleKind.FIXED_PRICE,
            target=encoding.target,
            how_to_call=HowToCall.DELEGATE_CALL,
            calldata=encoding.calldata,
            replacement_pattern=encoding.replacement_pattern,
            payment_token=prices.payment_token,
            base_price=prices.base_price,
            extra=prices.extra,
            listing_time=times.listing_time,
            expiration_time=times.expiration_time,
            salt=generate_pseudo_random_salt(),
            metadata=OrderMetadata(bundle=bundle),
        )
        logger.debug(
            "bundle_sell_order_built",
            maker=account,
            asset_count=len(bundle.assets),
            base_price=order.base_price,
            sale_kind=order.sale_kind.name,
        )
        return order

    async def make_matching_order(
        self,
        order: UnhashedOrder,
        account_address: str,
        recipient_address: str,
    ) -> UnhashedOrder:
        """Build the counter order that fills an order.

        The counter order takes the opposite side at the order's base
        price, with the fee recipient on whichever side the order left
        empty.

        Args:
            order: Order to fill
            account_address: Maker of the counter order
            recipient_address: Account written into the counter order's calldata

        Returns:
            The unsigned counter order
        """
        account = validate_account_address(account_address)
        recipient = validate_account_address(recipient_address)
        encoding = self._encode_counter_calldata(order, recipient)

        now = await self.chain.get_block_timestamp()
        times = get_time_parameters(0, now=now)
        fee_recipient = (
            OPENSEA_FEE_RECIPIENT
            if normalize_address(order.fee_recipient) == NULL_ADDRESS
            else NULL_ADDRESS
        )

        return UnhashedOrder(
            exchange=order.exchange,
            maker=account,
            taker=order.maker,
            quantity=order.quantity,
            maker_relayer_fee=order.maker_relayer_fee,
            taker_relayer_fee=order.taker_relayer_fee,
            maker_protocol_fee=order.maker_protocol_fee,
            taker_protocol_fee=order.taker_protocol_fee,
            maker_referrer_fee=order.maker_referrer_fee,
            waiting_for_best_counter_order=False,
            fee_method=order.fee_method,
            fee_recipient=fee_recipient,
            side=OrderSide.SELL if order.is_buy_order else OrderSide.BUY,
            sale_kind=SaleKind.FIXED_PRICE,
            target=encoding.target,
            how_to_call=order.how_to_call,
            calldata=encoding.calldata,
            replacement_pattern=encoding.replacement_pattern,
            payment_token=order.payment_token,
            base_price=order.base_price,
            extra=0,
            listing_time=times.listing_time,
            expiration_time=times.expiration_time,
            salt=generate_pseudo_random_salt(),
            metadata=order.metadata,
        )

    def _encode_counter_calldata(self, order: UnhashedOrder, recipient: str) -> CallEncoding:
        bundle = order.metadata.bundle
        if bundle is not None:
            schemas = [get_schema(name) for name in bundle.schemas]
            if order.is_buy_order:
                return encode_atomicized_sell(
                    schemas, bundle.assets, recipient, self.config.network
                )
            return encode_atomicized_buy(schemas, bundle.assets, recipient, self.config.network)

        asset = order.metadata.asset
        if asset is None:
            raise OrderValidationError("Order metadata must contain an asset or a bundle")
        schema = get_schema(order.metadata.schema_name)
        if order.is_buy_order:
            return encode_sell(schema, asset, recipient)
        return encode_buy(schema, asset, recipient)

    # Approvals

    async def _confirm(self, transaction_hash: str, event: str) -> None:
        logger.info(event, tx_hash=transaction_hash)
        receipt = await self.chain.wait_for_transaction(transaction_hash)
        if not receipt.succeeded:
            raise ApprovalError(f"Transaction {transaction_hash} failed")

    async def _get_or_register_proxy(self, account: str) -> str:
        proxy = await self.chain.get_proxy(account)
        if proxy is not None:
            return proxy

        logger.info("registering_proxy", account=account)
        await self._confirm(await self.chain.register_proxy(account), "proxy_registration_sent")
        proxy = await self.chain.get_proxy(account)
        if proxy is None:
            raise ApprovalError("Failed to initialize your account, please try again")
        return proxy

    async def approve_fungible_token(
        self,
        account_address: str,
        token_address: str,
        proxy_address: str | None = None,
        minimum_amount: int = MAX_UINT_256,
    ) -> str | None:
        """Let a proxy move an ERC-20 token on the account's behalf.

        Args:
            account_address: Token owner
            token_address: ERC-20 contract
            proxy_address: Spender (defaults to the token transfer proxy)
            minimum_amount: Allowance that counts as already approved

        Returns:
            Approval transaction hash, or None if the allowance already sufficed
        """
        account = normalize_address(account_address)
        token = normalize_address(token_address)
        proxy = normalize_address(proxy_address or self.config.token_transfer_proxy_address)

        allowance = await self.chain.erc20_allowance(token, account, proxy)
        if allowance >= minimum_amount:
            logger.debug("already_approved_enough_currency", token_address=token)
            return None

        logger.info("approving_currency", token_address=token, spender=proxy)
        tx_hash = await self.chain.erc20_approve(token, account, proxy, MAX_UINT_256)
        await self._confirm(tx_hash, "currency_approval_sent")
        return tx_hash

    async def approve_semi_or_non_fungible_token(
        self,
        token_id: str | int,
        token_address: str,
        account_address: str,
        proxy_address: str | None = None,
        skip_approve_all_if_token_address_is_approved: bool = False,
    ) -> str | None:
        """Let the account's proxy transfer an ERC-721 or ERC-1155 token.

        Approves the proxy for every token of the contract when the
        contract supports it, otherwise for this one token.

        Args:
            token_id: Token to approve
            token_address: Token contract
            account_address: Token owner
            proxy_address: Account's proxy (looked up if not provided)
            skip_approve_all_if_token_address_is_approved: Skip the approve-all
                transaction (an earlier asset of the same contract already sent one)

        Returns:
            Approval transaction hash, or None if nothing had to be sent

        Raises:
            ApprovalError: If the account has no proxy or the approval failed
        """
        account = normalize_address(account_address)
        token = normalize_address(token_address)
        proxy = proxy_address or await self.chain.get_proxy(account)
        if proxy is None:
            raise ApprovalError("Uninitialized account")
        proxy = normalize_address(proxy)

        approved_for_all = await self.chain.is_approved_for_all(token, account, proxy)
        if approved_for_all:
            logger.debug("already_approved_proxy_for_all_tokens", token_address=token)
            return None

        if approved_for_all is False:
            if skip_approve_all_if_token_address_is_approved:
                logger.debug("already_approving_proxy_for_all_tokens", token_address=token)
                return None
            logger.info("approving_all_tokens", token_address=token, proxy=proxy)
            try:
                tx_hash = await self.chain.set_approval_for_all(token, account, proxy, True)
                await self._confirm(tx_hash, "approve_all_sent")
            except Exception as e:
                raise ApprovalError(
                    "Couldn't get permission to approve these tokens for trading. "
                    "Their contract might not be implemented correctly. "
                    "Please contact the developer!"
                ) from e
            return tx_hash

        # Contract has no approve-all: approve this token alone
        if await self.chain.erc721_get_approved(token, int(token_id)) == proxy:
            logger.debug("already_approved_proxy_for_token", token_address=token)
            return None

        logger.info("approving_single_token", token_address=token, token_id=str(token_id))
        try:
            tx_hash = await self.chain.erc721_approve(token, account, proxy, int(token_id))
            await self._confirm(tx_hash, "single_token_approval_sent")
        except Exception as e:
            raise ApprovalError(
                "Couldn't get permission to approve this token for trading. "
                "Its contract might not be implemented correctly. "
                "Please contact the developer!"
            ) from e
        return tx_hash

    async def get_token_balance(
        self,
        account_address: str,
        token_address: str,
        schema_name: WyvernSchemaName = WyvernSchemaName.ERC20,
        token_id: str | int | None = None,
    ) -> int:
        """Balance of a token in base units (the null address is ether)."""
        account = normalize_address(account_address)
        token = normalize_address(token_address)

        if token == NULL_ADDRESS:
            return await self.chain.get_ether_balance(account)
        if schema_name == WyvernSchemaName.ERC20:
            return await self.chain.erc20_balance_of(token, account)
        if token_id is None:
            raise OrderValidationError(f"{schema_name.value} balance requires a token id")
        if schema_name == WyvernSchemaName.ERC1155:
            return await self.chain.erc1155_balance_of(token, account, int(token_id))
        owner = await self.chain.erc721_owner_of(token, int(token_id))
        return 1 if owner == account else 0

    async def _owns_asset(
        self, schema: Schema, asset: WyvernAsset, account: str, proxy: str
    ) -> bool:
        try:
            if schema.name == WyvernSchemaName.ERC721:
                owner = await self.chain.erc721_owner_of(asset.address, int(asset.id or 0))
                return owner in (account, proxy)
            balance = await self.get_token_balance(
                account, asset.address, schema.name, asset.id
            )
        except Exception as e:
            logger.warning(
                "ownership_check_failed",
                token_address=asset.address,
                token_id=asset.id,
                error=str(e),
            )
            return True
        return balance >= (asset.quantity or 1)

    async def sell_order_validation_and_approvals(
        self, order: UnhashedOrder, account_address: str
    ) -> None:
        """Check ownership and send every approval a sell order needs.

        Registers the account's proxy if it has none, approves the proxy
        for each asset (one approve-all per contract), approves the
        payment token for fees and checks the order's parameters.

        Raises:
            OwnershipError: If the account does not own an asset
            ApprovalError: If an approval transaction fails
            OrderValidationError: If the order parameters are invalid
        """
        account = normalize_address(account_address)
        assets, schema_names = _order_assets(order)

        proxy = await self._get_or_register_proxy(account)
        approved_contracts: set[str] = set()

        for asset, schema_name in zip(assets, schema_names, strict=True):
            schema = get_schema(schema_name)
            if not await self._owns_asset(schema, asset, account, proxy):
                logger.warning(
                    "insufficient_ownership", token_address=asset.address, token_id=asset.id
                )
                raise OwnershipError("You don't own enough to do that")

            if schema.fungible:
                await self.approve_fungible_token(
                    account, asset.address, proxy, minimum_amount=asset.quantity or 0
                )
                continue

            await self.approve_semi_or_non_fungible_token(
                asset.id or "0",
                asset.address,
                account,
                proxy,
                skip_approve_all_if_token_address_is_approved=asset.address in approved_contracts,
            )
            approved_contracts.add(asset.address)

        # Fees on accepted bids are paid in the payment token
        if normalize_address(order.payment_token) != NULL_ADDRESS:
            await self.approve_fungible_token(
                account, order.payment_token, minimum_amount=order.base_price
            )

        if not validate_order_parameters(order, self.config.exchange_address):
            raise OrderValidationError(
                "Failed to validate sell order parameters. Make sure you're on the right network!"
            )

    async def buy_order_validation_and_approvals(
        self,
        order: UnhashedOrder,
        account_address: str,
        counter_order: UnhashedOrder | None = None,
    ) -> None:
        """Check the buyer's balance and approve the payment token.

        Args:
            order: Buy order to check
            account_address: Buyer
            counter_order: Sell order being taken, whose current price must be covered

        Raises:
            InsufficientBalanceError: If the buyer cannot pay
            OrderValidationError: If the order parameters are invalid
        """
        account = normalize_address(account_address)
        token = normalize_address(order.payment_token)

        if token != NULL_ADDRESS:
            required = order.base_price
            if counter_order is not None:
                now = await self.chain.get_block_timestamp()
                required = calculate_final_price(
                    counter_order.side,
                    counter_order.sale_kind,
                    counter_order.base_price,
                    counter_order.extra,
                    counter_order.listing_time,
                    counter_order.expiration_time,
                    now,
                )

            balance = await self.get_token_balance(account, token)
            if balance < required:
                logger.warning(
                    "insufficient_balance", token_address=token, balance=balance, required=required
                )
                if token == normalize_address(self.config.weth_address):
                    raise InsufficientBalanceError(
                        "Insufficient balance. You may need to wrap Ether."
                    )
                raise InsufficientBalanceError("Insufficient balance.")

            await self.approve_fungible_token(account, token, minimum_amount=required)

        if not validate_order_parameters(order, self.config.exchange_address):
            raise OrderValidationError(
                "Failed to validate buy order parameters. Make sure you're on the right network!"
            )

    # Matching

    def _order_is_valid(self, order: UnhashedOrder) -> bool:
        if not validate_order_parameters(order, self.config.exchange_address):
            return False
        if isinstance(order, Order):
            return order.hash == get_order_hash(order)
        return True

    async def validate_match(
        self,
        buy: UnhashedOrder,
        sell: UnhashedOrder,
        account_address: str,
        should_validate_buy: bool = False,
        should_validate_sell: bool = False,
    ) -> bool:
        """Check that a buy and a sell order can be matched right now.

        Args:
            buy: Buy order
            sell: Sell order
            account_address: Account that would send the match
            should_validate_buy: Also check the buy order's own validity
            should_validate_sell: Also check the sell order's own validity

        Returns:
            True

        Raises:
            OrderMatchError: If the orders cannot be matched
        """
        if should_validate_buy and not self._order_is_valid(buy):
            raise OrderMatchError(
                "Error matching this listing: Invalid buy order. "
                "It may have recently been removed.",
                reason="invalid_buy_order",
            )
        if should_validate_sell and not self._order_is_valid(sell):
            raise OrderMatchError(
                "Error matching this listing: Invalid sell order. "
                "It may have recently been removed.",
                reason="invalid_sell_order",
            )

        now = await self.chain.get_block_timestamp()
        result = check_orders_match(buy, sell, self.config.exchange_address, now)
        if not result.is_valid:
            assert result.error is not None
            logger.warning(
                "orders_cannot_match",
                account=normalize_address(account_address),
                reason=result.error.value,
                detail=result.error_detail,
            )
            detail = result.error_detail or result.error.value.replace("_", " ")
            raise OrderMatchError(
                f"Error matching this listing: {detail}. "
                "Please contact the maker or try again later!",
                reason=result.error.value,
            )

        logger.debug("orders_can_match", price=result.price)
        return True

    # Create and post

    async def _sign_and_post(self, order: UnhashedOrder, account: str) -> Order:
        hashed = hash_order(order)
        signature = await self.chain.sign_message(account, hashed.hash)
        signed = hashed.model_copy(update={"v": signature.v, "r": signature.r, "s": signature.s})
        posted = await self.api.post_order(signed)
        logger.info("order_created", order_hash=signed.hash, side=signed.side.name)
        return posted

    async def create_bundle_buy_order(
        self,
        assets: Sequence[Asset],
        quantities: Sequence[int | float | str | Decimal],
        account_address: str,
        start_amount: Amount,
        expiration_time: int = 0,
        payment_token_address: str | None = None,
        extra_bounty_basis_points: int = 0,
        sell_order: UnhashedOrder | None = None,
        referrer_address: str | None = None,
    ) -> Order:
        """Build, approve, sign and post an offer on a bundle."""
        order = await self.make_bundle_buy_order(
            assets,
            quantities,
            account_address,
            start_amount,
            expiration_time=expiration_time,
            payment_token_address=payment_token_address,
            extra_bounty_basis_points=extra_bounty_basis_points,
            sell_order=sell_order,
            referrer_address=referrer_address,
        )
        await self.buy_order_validation_and_approvals(order, account_address, sell_order)
        return await self._sign_and_post(order, normalize_address(account_address))

    async def create_bundle_sell_order(
        self,
        bundle_name: str,
        bundle_description: str | None,
        assets: Sequence[Asset],
        quantities: Sequence[int | float | str | Decimal],
        account_address: str,
        start_amount: Amount,
        end_amount: Amount | None = None,
        expiration_time: int = 0,
        listing_time: int | None = None,
        wait_for_highest_bid: bool = False,
        english_auction_reserve_price: Amount | None = None,
        payment_token_address: str = NULL_ADDRESS,
        extra_bounty_basis_points: int = 0,
        buyer_address: str = NULL_ADDRESS,
        bundle_external_link: str | None = None,
    ) -> Order:
        """Build, approve, sign and post a bundle listing."""
        order = await self.make_bundle_sell_order(
            bundle_name,
            bundle_description,
            assets,
            quantities,
            account_address,
            start_amount,
            end_amount=end_amount,
            expiration_time=expiration_time,
            listing_time=listing_time,
            wait_for_highest_bid=wait_for_highest_bid,
            english_auction_reserve_price=english_auction_reserve_price,
            payment_token_address=payment_token_address,
            extra_bounty_basis_points=extra_bounty_basis_points,
            buyer_address=buyer_address,
            bundle_external_link=bundle_external_link,
        )
        await self.sell_order_validation_and_approvals(order, account_address)
        return await self._sign_and_post(order, normalize_address(account_address))


def _order_assets(
    order: UnhashedOrder,
) -> tuple[list[WyvernAsset], list[WyvernSchemaName | None]]:
    """Assets an order trades with the schema of each."""
    bundle = order.metadata.bundle
    if bundle is not None:
        return list(bundle.assets), list(bundle.schemas)
    if order.metadata.asset is None:
        raise OrderValidationError("Order metadata must contain an asset or a bundle")
    return [order.metadata.asset], [order.metadata.schema_name]
