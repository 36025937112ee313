"""
Pneuma - On-chain interaction layer for the Rena SDK.

Provides message types and builders, Move argument encoding, the REST
client and the wallet for Initia L1 and its rollups.

Uses httpx + aptos-sdk BCS; transaction signing is pluggable (TxSigner).
"""
