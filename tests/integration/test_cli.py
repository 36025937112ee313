"""
CLI integration tests using Click's test runner.

Tests verify that the CLI commands work end-to-end via the Click
CliRunner, without requiring network access or a transaction signer.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from rena.cli import cli
from rena.sigil.key import MnemonicKey

TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)
RECIPIENT = "init1dflp5l3p5y6zhh7tnus60j2w88mqhp6p2tpncs"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """No real ~/.rena/.env, no stray RENA_* or MNEMONIC variables."""
    for key in list(os.environ):
        if key.startswith("RENA_") or key == "MNEMONIC":
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    env_path = tmp_path / ".rena" / ".env"
    with patch("rena.config.RENA_ENV", env_path), patch("rena.sigil.key.RENA_ENV", env_path):
        yield env_path


@pytest.fixture()
def wallet(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv("MNEMONIC", TEST_MNEMONIC)
    return MnemonicKey(TEST_MNEMONIC).acc_address


def _dry_run_payload(output: str) -> dict:
    return json.loads(output[output.index("{"):])


class TestVersionAndInfo:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "bridge-out" in result.output

    def test_info(self, runner: CliRunner, wallet: str) -> None:
        result = runner.invoke(cli, ["info"])
        assert result.exit_code == 0
        assert wallet in result.output
        assert "initiation-2" in result.output


class TestWhoami:
    def test_whoami_with_wallet(self, runner: CliRunner, wallet: str) -> None:
        result = runner.invoke(cli, ["whoami"])
        assert result.exit_code == 0
        assert f"Address: {wallet}" in result.output

    def test_whoami_without_wallet(self, runner: CliRunner, isolated_env: Path) -> None:
        result = runner.invoke(cli, ["whoami"])
        assert result.exit_code != 0
        assert "No wallet found" in result.output


class TestKeygen:
    def test_keygen_creates_env(self, runner: CliRunner, isolated_env: Path) -> None:
        try:
            result = runner.invoke(cli, ["keygen", "--words", "12"])
            assert result.exit_code == 0
            assert "Keygen Complete" in result.output
            assert isolated_env.exists()
            assert "MNEMONIC=" in isolated_env.read_text(encoding="utf-8")
        finally:
            os.environ.pop("MNEMONIC", None)

    def test_keygen_keeps_existing(self, runner: CliRunner, wallet: str) -> None:
        result = runner.invoke(cli, ["keygen"])
        assert result.exit_code == 0
        assert "Existing mnemonic found" in result.output
        assert wallet in result.output


class TestRequestId:
    def test_encode(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["uuid", "encode", "f57956ae-51bf-4ee6-9f5c-b6eeec2bf623"])
        assert result.exit_code == 0
        assert result.output.strip() == str(0xF57956AE51BF4EE69F5CB6EEEC2BF623)

    def test_encode_hex(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["uuid", "encode", "--hex", "f57956ae-51bf-4ee6-9f5c-b6eeec2bf623"])
        assert result.output.strip() == "0x00000000000000000000000000000000f57956ae51bf4ee69f5cb6eeec2bf623"

    def test_encode_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["uuid", "encode", "not-a-uuid"])
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_decode_hex(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["uuid", "decode", "0xf57956ae51bf4ee69f5cb6eeec2bf623"])
        assert result.exit_code == 0
        assert result.output.strip() == "f57956ae-51bf-4ee6-9f5c-b6eeec2bf623"

    def test_decode_truncates(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["uuid", "decode", str(2**128)])
        assert result.exit_code == 0
        assert "00000000-0000-0000-0000-000000000000" in result.output

    def test_decode_strict(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["uuid", "decode", "--strict", str(2**128)])
        assert result.exit_code == 1


class TestDryRun:
    def test_send(self, runner: CliRunner, wallet: str) -> None:
        result = runner.invoke(cli, ["send", "--to", RECIPIENT, "--amount", "1000uinit", "--dry-run"])
        assert result.exit_code == 0, result.output
        payload = _dry_run_payload(result.output)
        msg = payload["msgs"][0]
        assert msg["@type"] == "/cosmos.bank.v1beta1.MsgSend"
        assert msg["from_address"] == wallet
        assert msg["amount"] == [{"amount": "1000", "denom": "uinit"}]

    def test_send_invalid_recipient(self, runner: CliRunner, wallet: str) -> None:
        result = runner.invoke(cli, ["send", "--to", "nobody", "--amount", "1uinit", "--dry-run"])
        assert result.exit_code == 1
        assert "Invalid recipient" in result.output

    def test_bridge(self, runner: CliRunner, wallet: str) -> None:
        result = runner.invoke(cli, ["bridge", "--to", RECIPIENT, "--amount", "1000000uinit", "--dry-run"])
        assert result.exit_code == 0, result.output
        msg = _dry_run_payload(result.output)["msgs"][0]
        assert msg["bridge_id"] == "1152"

    def test_tee_verify_requires_contract(self, runner: CliRunner, wallet: str) -> None:
        result = runner.invoke(cli, [
            "tee", "verify",
            "--request-id", "1f961e1f-cef8-40da-bfa6-6e44e8791a85",
            "--message", '{"text": "hi"}',
            "--signature", "2b1f",
            "--timestamp", "1745089251",
            "--dry-run",
        ])
        assert result.exit_code == 1
        assert "RENA_MAINNET_TEE_VERIFY_CONTRACT" in result.output

    def test_tee_verify(self, runner: CliRunner, wallet: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENA_MAINNET_TEE_VERIFY_CONTRACT", "init1teeverify")
        result = runner.invoke(cli, [
            "tee", "verify",
            "--request-id", "1f961e1f-cef8-40da-bfa6-6e44e8791a85",
            "--message", '{"text": "hi"}',
            "--signature", "2b1f",
            "--timestamp", "1745089251",
            "--numeric-id",
            "--dry-run",
        ])
        assert result.exit_code == 0, result.output
        msg = _dry_run_payload(result.output)["msgs"][0]
        assert msg["module_name"] == "agent_tweet_event_aggregate"
        assert len(msg["args"]) == 4

    def test_vip_update_score(self, runner: CliRunner, wallet: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENA_MAINNET_VIP_CONTRACT", "init1vip")
        result = runner.invoke(cli, [
            "vip", "update-score",
            "--stage", "1",
            "--score", f"{RECIPIENT}=3",
            "--score", f"{wallet}=5",
            "--dry-run",
        ])
        assert result.exit_code == 0, result.output
        msg = _dry_run_payload(result.output)["msgs"][0]
        assert msg["function_name"] == "update_score_script"

    def test_vip_update_score_rejects_non_decimal(
        self, runner: CliRunner, wallet: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RENA_MAINNET_VIP_CONTRACT", "init1vip")
        result = runner.invoke(cli, [
            "vip", "update-score", "--stage", "1", "--score", f"{RECIPIENT}=\u00b2", "--dry-run",
        ])
        assert result.exit_code == 1
        assert "Expected ADDRESS=SCORE" in result.output

    def test_broadcast_without_signer(self, runner: CliRunner, wallet: str) -> None:
        result = runner.invoke(cli, ["send", "--to", RECIPIENT, "--amount", "1uinit"])
        assert result.exit_code == 1
        assert "No transaction signer configured" in result.output


class TestInvalidMnemonic:
    @pytest.fixture()
    def bad_wallet(self, isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MNEMONIC", "not a real mnemonic phrase at all")

    def test_whoami(self, runner: CliRunner, bad_wallet: None) -> None:
        result = runner.invoke(cli, ["whoami"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid mnemonic" in result.output

    def test_balance(self, runner: CliRunner, bad_wallet: None) -> None:
        result = runner.invoke(cli, ["balance"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid mnemonic" in result.output

    def test_keygen_suggests_force(self, runner: CliRunner, bad_wallet: None) -> None:
        result = runner.invoke(cli, ["keygen"])
        assert result.exit_code == 1
        assert "--force" in result.output
