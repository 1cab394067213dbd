"""Load the chain config YAML."""

from pathlib import Path

import yaml

from chaindocs.chains import ENVIRONMENTS
from chaindocs.paths import chains_config_path


def load_chains(path: Path | str | None = None) -> list[dict]:
    """Read and parse the chain config.

    Args:
        path: Path to the config file. Defaults to ``CHAINDOCS_CONFIG``.

    Returns:
        List of chain dicts, in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the file isn't a mapping with a ``chains`` list.
    """
    config_path = Path(path) if path else chains_config_path()
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Chain config at {config_path} is not a YAML mapping")

    chains = data.get("chains")
    if not isinstance(chains, list):
        raise ValueError(f"Chain config at {config_path} has no 'chains' list")

    return chains


def doc_chains(chains: list[dict]) -> list[dict]:
    """Chains whose mainnet entry carries extra_details (the documented set)."""
    return [
        c for c in chains
        if (c.get("mainnet") or {}).get("extra_details") is not None
    ]


def chain_networks(chain: dict) -> list[tuple[str, dict]]:
    """Return ``(environment, network)`` pairs present on a chain."""
    return [(env, chain[env]) for env in ENVIRONMENTS if chain.get(env)]
