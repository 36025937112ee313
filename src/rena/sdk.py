"""
InitiaSDK - one wallet bound to one chain.

Bundles the REST client, the mnemonic key and the wallet so example
drivers and the CLI can query balances, look up transactions, read the
registered TEE public key and broadcast messages.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import httpx

from .config import ContractConfig, get_chain_config, get_contract_config
from .pneuma.contracts import PUBLIC_KEY_MODULE
from .pneuma.msgs import Msg
from .pneuma.rest import BroadcastResult, RESTClient
from .pneuma.wallet import TxSigner, Wallet
from .sigil.key import MnemonicKey, load_mnemonic

logger = logging.getLogger(__name__)


class InitiaSDK:
    def __init__(
        self,
        mnemonic: str,
        chain_id: str,
        rest_url: Optional[str] = None,
        signer: Optional[TxSigner] = None,
        transport: Optional[httpx.BaseTransport] = None,
        account: int = 0,
        index: int = 0,
        coin_type: int = 60,
    ) -> None:
        config = get_chain_config(chain_id)
        self.chain_id = chain_id
        self.rest = RESTClient(
            rest_url or config.rest_url,
            chain_id=chain_id,
            gas_prices=config.gas_prices,
            gas_adjustment=config.gas_adjustment,
            transport=transport,
        )
        self.key = MnemonicKey(mnemonic, account=account, index=index, coin_type=coin_type)
        self.wallet = Wallet(self.rest, self.key, signer=signer)

        logger.info("Account %s is imported on %s", self.key.acc_address, chain_id)

    def get_account_address(self) -> str:
        return self.key.acc_address

    def get_account_balance(self, address: Optional[str] = None) -> list[dict[str, str]]:
        """Balances of ``address`` (default: this wallet) as denom/amount dicts."""
        coins = self.rest.balance(address or self.key.acc_address)
        return [c.to_data() for c in coins]

    def get_tx_status(self, tx_hash: str) -> dict[str, Any]:
        return self.rest.tx_info(tx_hash)

    def get_tee_public_key(
        self,
        network: str = "mainnet",
        config: Optional[ContractConfig] = None,
        function_name: str = "get_public_key",
    ) -> Any:
        """Read the currently registered TEE public key via a view call."""
        contracts = config if config is not None else get_contract_config(network)
        return self.rest.view(
            contracts.require("tee_verify_contract"),
            PUBLIC_KEY_MODULE,
            function_name,
        )

    def sign_and_broadcast(self, msgs: Sequence[Msg], memo: str = "") -> BroadcastResult:
        return self.wallet.sign_and_broadcast(msgs, memo)


def create_sdk(
    chain_id: str,
    mnemonic: Optional[str] = None,
    rest_url: Optional[str] = None,
    signer: Optional[TxSigner] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> InitiaSDK:
    """Build an SDK for ``chain_id`` using the stored mnemonic unless one is given."""
    return InitiaSDK(
        mnemonic or load_mnemonic(),
        chain_id,
        rest_url=rest_url,
        signer=signer,
        transport=transport,
    )
