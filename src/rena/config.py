"""
Chain and contract configuration.

Chain endpoints are fixed per chain ID.  Contract addresses differ per
network and are read from the environment, optionally populated from
~/.rena/.env or a local .env file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

RENA_DIR = Path.home() / ".rena"
RENA_ENV = RENA_DIR / ".env"

L1_CHAIN_ID = "initiation-2"
ROLLUP_CHAIN_ID = "nuwa-rollup-1"

ROLLUP_L2_DENOM = "l2/6df67ba2b8890ef45c525bdccac4d69e48502e9ee482fac8cc6eb9036c2fb364"
DEFAULT_BRIDGE_ID = 1152

NETWORKS = ("testnet", "mainnet")


class ConfigNotFoundError(LookupError):
    pass


@dataclass(frozen=True)
class ChainConfig:
    chain_id: str
    rest_url: str
    gas_prices: str
    gas_adjustment: str


CHAIN_CONFIGS: dict[str, ChainConfig] = {
    L1_CHAIN_ID: ChainConfig(
        chain_id=L1_CHAIN_ID,
        rest_url="https://rest.testnet.initia.xyz",
        gas_prices="0.15uinit",
        gas_adjustment="1.75",
    ),
    ROLLUP_CHAIN_ID: ChainConfig(
        chain_id=ROLLUP_CHAIN_ID,
        rest_url="https://rest-nuwa-rollup-1.anvil.asia-southeast.initia.xyz",
        gas_prices=f"0.1{ROLLUP_L2_DENOM}",
        gas_adjustment="1.75",
    ),
}


def get_chain_config(chain_id: str) -> ChainConfig:
    """
    Look up endpoint and gas settings for a chain.

    Raises:
        ConfigNotFoundError: If the chain ID is unknown
    """
    config = CHAIN_CONFIGS.get(chain_id)
    if config is None:
        raise ConfigNotFoundError(f"Config not found for chain ID: {chain_id}")
    return config


@dataclass(frozen=True)
class ContractConfig:
    network: str
    tee_verify_contract: Optional[str] = None
    vip_contract: Optional[str] = None
    tee_public_key: Optional[str] = None

    def require(self, name: str) -> str:
        """Return a configured value or raise ConfigNotFoundError."""
        value = getattr(self, name)
        if not value:
            raise ConfigNotFoundError(
                f"{name} is not configured for {self.network}. "
                f"Set {_env_key(self.network, name)} in the environment or {RENA_ENV}."
            )
        return value


def _env_key(network: str, field_name: str) -> str:
    if field_name == "tee_public_key":
        return "RENA_TEE_PUBLIC_KEY"
    return f"RENA_{network.upper()}_{field_name.upper()}"


def load_env(env_path: Optional[Path] = None) -> None:
    """Load .env files into os.environ without overriding existing values."""
    env_path = env_path or RENA_ENV
    if env_path.exists():
        load_dotenv(env_path, override=False)
    load_dotenv(Path.cwd() / ".env", override=False)


def get_contract_config(network: str = "mainnet") -> ContractConfig:
    """
    Resolve contract addresses for a network.

    Raises:
        ConfigNotFoundError: If the network is unknown
    """
    if network not in NETWORKS:
        raise ConfigNotFoundError(f"Config not found for network: {network}")

    load_env()

    values = {}
    for f in fields(ContractConfig):
        if f.name == "network":
            continue
        values[f.name] = os.environ.get(_env_key(network, f.name)) or None

    return ContractConfig(network=network, **values)
