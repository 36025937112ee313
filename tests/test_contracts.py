"""Tests for message types and builders."""

from __future__ import annotations

import base64
import json

import pytest

from rena.config import ConfigNotFoundError, ContractConfig
from rena.pneuma import bcs
from rena.pneuma.contracts import (
    bridge_out_token,
    bridge_token,
    create_public_key,
    encode_message,
    public_key_args,
    send_token,
    update_public_key,
    update_vip_score,
    update_vip_stage,
    verify_signature,
    verify_signature_args,
    vip_score_args,
    vip_stage_args,
)
from rena.pneuma.msgs import Coin, Coins, MsgExecute

SENDER = "init1sender"
RECIPIENT = "init1dflp5l3p5y6zhh7tnus60j2w88mqhp6p2tpncs"
L2_DENOM = "l2/6df67ba2b8890ef45c525bdccac4d69e48502e9ee482fac8cc6eb9036c2fb364"

CONFIG = ContractConfig(
    network="mainnet",
    tee_verify_contract="init1teeverify",
    vip_contract="init1vip",
)


class TestCoin:
    def test_parse(self) -> None:
        assert Coin.parse("1000uinit") == Coin("uinit", "1000")

    def test_parse_l2_denom(self) -> None:
        coin = Coin.parse(f"10000{L2_DENOM}")
        assert coin.denom == L2_DENOM
        assert coin.amount == "10000"

    def test_int_amount(self) -> None:
        assert Coin("uinit", 5).amount == "5"

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError):
            Coin.parse("uinit")

    def test_coins_parse(self) -> None:
        coins = Coins.parse("1000uinit,5uusdc")
        assert list(coins) == [Coin("uinit", "1000"), Coin("uusdc", "5")]
        assert str(coins) == "1000uinit,5uusdc"


class TestTokenMessages:
    def test_send_token(self) -> None:
        msg = send_token(SENDER, RECIPIENT, "1000uinit")
        assert msg.to_data() == {
            "@type": "/cosmos.bank.v1beta1.MsgSend",
            "from_address": SENDER,
            "to_address": RECIPIENT,
            "amount": [{"denom": "uinit", "amount": "1000"}],
        }

    def test_bridge_token(self) -> None:
        msg = bridge_token(SENDER, 1152, RECIPIENT, Coin("uinit", "1000000"))
        data = msg.to_data()
        assert data["@type"] == "/opinit.ophost.v1.MsgInitiateTokenDeposit"
        assert data["bridge_id"] == "1152"
        assert data["amount"] == {"denom": "uinit", "amount": "1000000"}

    def test_bridge_out_token(self) -> None:
        msg = bridge_out_token(SENDER, RECIPIENT, Coin(L2_DENOM, "10000"))
        data = msg.to_data()
        assert data["@type"] == "/opinit.opchild.v1.MsgInitiateTokenWithdrawal"
        assert data["to"] == RECIPIENT

    def test_messages_are_json_serializable(self) -> None:
        msg = send_token(SENDER, RECIPIENT, "1uinit")
        json.dumps(msg.to_data())


class TestContractCalls:
    @pytest.mark.parametrize(
        "builder, contract, module, function",
        [
            (create_public_key, "init1teeverify", "public_key_aggregate", "create"),
            (update_public_key, "init1teeverify", "public_key_aggregate", "update"),
            (verify_signature, "init1teeverify", "agent_tweet_event_aggregate", "create"),
            (update_vip_stage, "init1vip", "vip_score", "set_init_stage"),
            (update_vip_score, "init1vip", "vip_score", "update_score_script"),
        ],
    )
    def test_targets(self, builder, contract, module, function) -> None:
        msg = builder(SENDER, ["AQAAAAAAAAA="], config=CONFIG)
        assert isinstance(msg, MsgExecute)
        assert msg.sender == SENDER
        assert msg.module_address == contract
        assert msg.module_name == module
        assert msg.function_name == function
        assert msg.type_args == ()
        assert msg.args == ("AQAAAAAAAAA=",)

    def test_to_data(self) -> None:
        data = update_vip_stage(SENDER, vip_stage_args(1), config=CONFIG).to_data()
        assert data == {
            "@type": "/initia.move.v1.MsgExecute",
            "sender": SENDER,
            "module_address": "init1vip",
            "module_name": "vip_score",
            "function_name": "set_init_stage",
            "type_args": [],
            "args": ["AQAAAAAAAAA="],
        }

    def test_missing_contract(self) -> None:
        with pytest.raises(ConfigNotFoundError):
            create_public_key(SENDER, [], config=ContractConfig(network="testnet"))


class TestArguments:
    def test_public_key_args(self) -> None:
        assert public_key_args("04ab") == [bcs.bytes_vector("04ab")]

    def test_encode_message_is_compact_json_base64(self) -> None:
        message = {"text": "hi", "timestamp": 1745074851, "mediaIds": None}
        encoded = encode_message(message)
        assert json.loads(base64.b64decode(encoded)) == message
        assert b" " not in base64.b64decode(encoded)

    def test_verify_signature_args(self) -> None:
        request_id = "1f961e1f-cef8-40da-bfa6-6e44e8791a85"
        args = verify_signature_args(request_id, {"text": "hi"}, "2b1f", 1745089251)
        assert len(args) == 4
        assert base64.b64decode(args[0]) == bytes([36]) + request_id.encode("utf-8")
        assert args[2] == bcs.bytes_vector("2b1f")
        assert args[3] == bcs.u64(1745089251)

    def test_verify_signature_args_numeric_id(self) -> None:
        request_id = "1f961e1f-cef8-40da-bfa6-6e44e8791a85"
        args = verify_signature_args(request_id, "{}", "2b1f", 1, numeric_request_id=True)
        assert args[0] == bcs.request_id(request_id)

    def test_vip_score_args(self) -> None:
        args = vip_score_args(1, ["0x1", "0x2"], [3, 5])
        assert args == [bcs.u64(1), bcs.address_vector(["0x1", "0x2"]), bcs.u64_vector([3, 5])]

    def test_vip_score_args_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            vip_score_args(1, ["0x1"], [3, 5])
