"""Markdown renderers for generated documentation sections.

Every renderer is a pure function from chain config dicts to a string.
The strings are injected verbatim between tag markers.
"""

ENV_TITLES = {
    "mainnet": "Mainnet",
    "testnet": "Testnet",
    "devnet": "Devnet",
}

CHAIN_TYPE_TITLES = {
    "evm": "EVM",
    "svm": "SVM",
    "move": "Move",
    "cosmos": "Cosmos",
    "other": "Other",
}


def network_name(chain: dict, network: dict) -> str:
    """Display name for one network of a chain."""
    return network.get("name") or chain.get("name", "unknown")
