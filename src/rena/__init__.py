__all__ = [
    # Request id codec
    "CodecError",
    "InvalidFormatError",
    "PrecisionLossError",
    "uuid_to_u256",
    "u256_to_uuid",
    # Configuration
    "ChainConfig",
    "ContractConfig",
    "ConfigNotFoundError",
    "get_chain_config",
    "get_contract_config",
    # Keys
    "MnemonicKey",
    "generate_mnemonic",
    "load_mnemonic",
    # Messages
    "Coin",
    "Coins",
    "MsgExecute",
    "MsgInitiateTokenDeposit",
    "MsgInitiateTokenWithdrawal",
    "MsgSend",
    "send_token",
    "bridge_token",
    "bridge_out_token",
    "create_public_key",
    "update_public_key",
    "verify_signature",
    "update_vip_stage",
    "update_vip_score",
    # Network
    "BroadcastError",
    "BroadcastResult",
    "RESTClient",
    "RestError",
    "TxSigner",
    "Wallet",
    # SDK
    "InitiaSDK",
    "create_sdk",
    "hex_to_string",
]

from .codec import (
    CodecError,
    InvalidFormatError,
    PrecisionLossError,
    u256_to_uuid,
    uuid_to_u256,
)
from .config import (
    ChainConfig,
    ConfigNotFoundError,
    ContractConfig,
    get_chain_config,
    get_contract_config,
)
from .sigil.key import MnemonicKey, generate_mnemonic, load_mnemonic
from .pneuma.msgs import (
    Coin,
    Coins,
    MsgExecute,
    MsgInitiateTokenDeposit,
    MsgInitiateTokenWithdrawal,
    MsgSend,
)
from .pneuma.contracts import (
    bridge_out_token,
    bridge_token,
    create_public_key,
    send_token,
    update_public_key,
    update_vip_score,
    update_vip_stage,
    verify_signature,
)
from .pneuma.rest import BroadcastResult, RESTClient, RestError
from .pneuma.wallet import BroadcastError, TxSigner, Wallet
from .sdk import InitiaSDK, create_sdk
from .utils import hex_to_string
