"""Chain config: load and validate the chain metadata YAML."""

ENVIRONMENTS = ("mainnet", "testnet", "devnet")
