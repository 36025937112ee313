"""
Theurgy - Command implementations for the Rena CLI.

Each module groups related top-level CLI commands:
- keygen:     Create or show the wallet mnemonic
- query:      Balances and transaction status
- transfer:   Token transfer, bridge deposit and withdrawal
- tee:        TEE public key registration and signature verification
- vip:        VIP stage and score updates
- request_id: UUID <-> u256 request id conversion
"""
