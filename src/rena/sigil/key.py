"""
Mnemonic Key Management for the Rena SDK.

Derives secp256k1 signing keys from a BIP-39 mnemonic along a BIP-44 path
and exposes the bech32 account address used on Initia chains.

- coin type 60 (default): Ethereum-style address, keccak of the public key
- any other coin type:    Cosmos-style address, ripemd160(sha256(pubkey))

The mnemonic is stored in ~/.rena/.env as MNEMONIC.
"""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Optional

import bech32
from Crypto.Hash import RIPEMD160
from dotenv import load_dotenv
from eth_account import Account
from eth_keys import keys
from eth_utils import ValidationError

from ..config import RENA_ENV

ACC_PREFIX = "init"
ETH_COIN_TYPE = 60

Account.enable_unaudited_hdwallet_features()


class MnemonicKey:
    """secp256k1 key derived from a mnemonic at m/44'/coin'/account'/0/index."""

    def __init__(
        self,
        mnemonic: str,
        account: int = 0,
        index: int = 0,
        coin_type: int = ETH_COIN_TYPE,
    ) -> None:
        if not mnemonic or not mnemonic.strip():
            raise ValueError("Mnemonic must not be empty")
        self.mnemonic = mnemonic.strip()
        self.account = account
        self.index = index
        self.coin_type = coin_type
        try:
            self._local = Account.from_mnemonic(self.mnemonic, account_path=self.derivation_path)
        except ValidationError as exc:
            raise ValueError(f"Invalid mnemonic: {exc}") from exc
        self._key = keys.PrivateKey(bytes(self._local.key))

    @property
    def derivation_path(self) -> str:
        return f"m/44'/{self.coin_type}'/{self.account}'/0/{self.index}"

    @property
    def private_key(self) -> bytes:
        return self._key.to_bytes()

    @property
    def public_key(self) -> bytes:
        """33-byte compressed secp256k1 public key."""
        return self._key.public_key.to_compressed_bytes()

    @property
    def raw_address(self) -> bytes:
        """20-byte account address."""
        if self.coin_type == ETH_COIN_TYPE:
            return self._key.public_key.to_canonical_address()
        sha = hashlib.sha256(self.public_key).digest()
        return RIPEMD160.new(sha).digest()

    @property
    def acc_address(self) -> str:
        return bytes_to_address(self.raw_address)

    def sign_digest(self, digest: bytes) -> bytes:
        """Sign a 32-byte digest, returning the 64-byte r||s signature."""
        signature = self._key.sign_msg_hash(digest)
        return signature.to_bytes()[:64]

    def __repr__(self) -> str:
        return f"MnemonicKey(acc_address={self.acc_address!r}, path={self.derivation_path!r})"


def bytes_to_address(raw: bytes, prefix: str = ACC_PREFIX) -> str:
    """Encode raw address bytes as a bech32 account address."""
    data = bech32.convertbits(raw, 8, 5)
    return bech32.bech32_encode(prefix, data)


def address_to_bytes(address: str, size: int = 32) -> bytes:
    """
    Decode a bech32 or 0x-hex address into a left-padded Move address.

    Args:
        address: ``init1...`` or ``0x...`` address
        size: Output width in bytes (Move addresses are 32 bytes)

    Raises:
        ValueError: If the address cannot be decoded
    """
    if address.startswith("0x"):
        hexed = address[2:]
        if len(hexed) % 2:
            hexed = "0" + hexed
        raw = bytes.fromhex(hexed)
    else:
        hrp, data = bech32.bech32_decode(address)
        if hrp is None or data is None:
            raise ValueError(f"Invalid bech32 address: {address}")
        decoded = bech32.convertbits(data, 5, 8, False)
        if decoded is None:
            raise ValueError(f"Invalid bech32 address: {address}")
        raw = bytes(decoded)

    if len(raw) > size:
        raise ValueError(f"Address longer than {size} bytes: {address}")
    return raw.rjust(size, b"\x00")


def is_valid_address(address: str) -> bool:
    try:
        address_to_bytes(address)
    except ValueError:
        return False
    return True


def generate_mnemonic(num_words: int = 24) -> str:
    """Generate a fresh BIP-39 mnemonic."""
    _, mnemonic = Account.create_with_mnemonic(num_words=num_words)
    return mnemonic


def save_mnemonic(mnemonic: str, env_path: Optional[Path] = None) -> Path:
    """
    Save mnemonic to .env file.

    Args:
        mnemonic: BIP-39 phrase
        env_path: Path to .env file (default: ~/.rena/.env)

    Returns:
        Path to the saved .env file
    """
    env_path = env_path or RENA_ENV
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = {}
    if env_path.exists():
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                k, v = line.split("=", 1)
                existing[k.strip()] = v.strip()

    existing["MNEMONIC"] = f'"{mnemonic}"'

    lines = [f"{k}={v}" for k, v in existing.items()]
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    if os.name != "nt":
        env_path.chmod(0o600)

    return env_path


def load_mnemonic(env_path: Optional[Path] = None, env_var: str = "MNEMONIC") -> str:
    """
    Load mnemonic from .env file or environment.

    Raises:
        ValueError: If the mnemonic is not set
    """
    env_path = env_path or RENA_ENV

    if env_path.exists():
        load_dotenv(env_path, override=True)

    mnemonic = os.environ.get(env_var, "").strip().strip('"')
    if not mnemonic:
        raise ValueError(
            f"{env_var} not found. Run 'rena keygen' or set {env_var} in {env_path}"
        )
    return mnemonic
