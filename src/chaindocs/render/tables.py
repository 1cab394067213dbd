"""Table renderers: contract addresses, chain ids, consistency levels."""

from __future__ import annotations

from chaindocs.chains import ENVIRONMENTS
from chaindocs.render import ENV_TITLES, network_name
from chaindocs.render.templates import ENV_TAB

# Contract keys understood by the contracts table
CONTRACTS = ("core", "token_bridge", "nft_bridge", "wormhole_relayer", "cctp")

_MISSING = "-"


def _cell(value) -> str:
    if value is None or value == "":
        return _MISSING
    return str(value).replace("|", "\\|").replace("\n", " ")


def format_markdown_table(headers: list[str], rows: list[list]) -> str:
    """Render a pipe table. Cells are stringified and ``|`` is escaped."""
    lines = [
        "| " + " | ".join(_cell(h) for h in headers) + " |",
        "|" + "|".join("---" for _ in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(_cell(v) for v in row) + " |")
    return "\n".join(lines)


def _indent(text: str, prefix: str = "    ") -> str:
    return "\n".join(prefix + line if line else line for line in text.splitlines())


def environment_tabs(tables: dict[str, str]) -> str:
    """Wrap per-environment tables in content tabs, skipping empty ones."""
    tabs = []
    for env in ENVIRONMENTS:
        table = tables.get(env)
        if not table:
            continue
        tabs.append(ENV_TAB.format(env_title=ENV_TITLES[env], body=_indent(table)))
    return "\n\n".join(tabs)


def _by_name(chains: list[dict]) -> list[dict]:
    return sorted(chains, key=lambda c: str(c.get("name", "")).lower())


def generate_all_contracts_table(chains: list[dict], contract: str) -> str:
    """Contract address table for one contract kind, one tab per environment.

    Chains that don't deploy the contract in an environment are left out.
    """
    tables: dict[str, str] = {}
    for env in ENVIRONMENTS:
        rows = []
        for chain in _by_name(chains):
            network = chain.get(env)
            if not network:
                continue
            address = (network.get("contracts") or {}).get(contract)
            if not address:
                continue
            rows.append([network_name(chain, network), f"`{address}`"])
        if rows:
            tables[env] = format_markdown_table(["Chain Name", "Contract Address"], rows)
    return environment_tabs(tables)


def generate_all_chain_ids_table(chains: list[dict]) -> str:
    """Wormhole chain id table, ordered by id, one tab per environment."""
    tables: dict[str, str] = {}
    for env in ENVIRONMENTS:
        entries = [
            (chain, chain[env]) for chain in chains if chain.get(env)
        ]
        entries.sort(key=lambda e: e[1].get("id", 0))
        rows = [
            [network_name(chain, network), network.get("id"), network.get("chain_id")]
            for chain, network in entries
        ]
        if rows:
            tables[env] = format_markdown_table(
                ["Chain Name", "Wormhole Chain ID", "Network ID"], rows,
            )
    return environment_tabs(tables)


def generate_all_consistency_levels_table(chains: list[dict]) -> str:
    """Mainnet consistency levels for every chain that declares finality."""
    rows = []
    for chain in _by_name(chains):
        mainnet = chain.get("mainnet") or {}
        finality = mainnet.get("finality")
        if not finality:
            continue
        details = finality.get("details")
        rows.append([
            network_name(chain, mainnet),
            finality.get("instant"),
            finality.get("safe"),
            finality.get("finalized"),
            finality.get("otherwise"),
            finality.get("final"),
            f"[Details]({details})" if details else None,
        ])
    return format_markdown_table(
        ["Chain", "Instant", "Safe", "Finalized", "Otherwise", "Time to Finalize", "Details"],
        rows,
    )
