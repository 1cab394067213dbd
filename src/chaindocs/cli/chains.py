"""Chain config CLI commands."""

import argparse

from chaindocs.chains.loader import chain_networks, load_chains
from chaindocs.chains.validator import validate_chains


def cmd_chains_validate(args: argparse.Namespace) -> int:
    chains = load_chains(args.config)
    result = validate_chains(chains)
    print(result.summary())
    return 0 if result.passed else 1


def cmd_chains_list(args: argparse.Namespace) -> int:
    chains = load_chains(args.config)
    if not chains:
        print("No chains configured.")
        return 0

    print(f"\n  {'Name':<24} {'Type':<8} {'Wormhole ID':<12} {'Environments':<28} {'Documented'}")
    print(f"  {'─' * 84}")
    for chain in chains:
        mainnet = chain.get("mainnet") or {}
        envs = ", ".join(env for env, _ in chain_networks(chain))
        documented = "yes" if mainnet.get("extra_details") is not None else "no"
        print(
            f"  {chain.get('name', '?'):<24} {chain.get('chain_type', '?'):<8} "
            f"{str(mainnet.get('id', '?')):<12} {envs:<28} {documented}"
        )
    print(f"\n  {len(chains)} chain(s)")
    return 0
