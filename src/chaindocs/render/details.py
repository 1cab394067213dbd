"""Per-chain details page."""

from __future__ import annotations

from chaindocs.chains.loader import chain_networks
from chaindocs.render import CHAIN_TYPE_TITLES, ENV_TITLES, network_name
from chaindocs.render.tables import environment_tabs, format_markdown_table
from chaindocs.render.templates import DETAILS_PAGE


def details_tag(chain: dict) -> str:
    """Tag name for a chain's details page, e.g. ``ETHEREUM_CHAIN_DETAILS``."""
    name = str(chain.get("name", "")).upper().replace(" ", "_").replace("-", "_")
    return f"{name}_CHAIN_DETAILS"


def chain_details_page(chain: dict) -> str:
    """Render the body of a chain's page under Supported Networks."""
    mainnet = chain.get("mainnet") or {}
    extra = mainnet.get("extra_details") or {}
    networks = chain_networks(chain)

    networks_table = format_markdown_table(
        ["Environment", "Name", "Wormhole Chain ID", "Network ID"],
        [
            [ENV_TITLES[env], network_name(chain, n), n.get("id"), n.get("chain_id")]
            for env, n in networks
        ],
    )

    contract_tables = {}
    for env, network in networks:
        contracts = network.get("contracts") or {}
        if contracts:
            contract_tables[env] = format_markdown_table(
                ["Contract", "Address"],
                [[key, f"`{addr}`"] for key, addr in sorted(contracts.items())],
            )
    contracts_block = environment_tabs(contract_tables) or "*No contracts deployed*"

    links = []
    for label in ("homepage", "explorer"):
        if extra.get(label):
            links.append(f"- [{label.capitalize()}]({extra[label]})")
    links_block = "\n".join(links) if links else "- *None listed*"

    return DETAILS_PAGE.format(
        title=extra.get("title") or chain.get("name", "unknown"),
        description=extra.get("description", ""),
        chain_type=CHAIN_TYPE_TITLES.get(chain.get("chain_type"), chain.get("chain_type")),
        networks_table=networks_table,
        contracts_block=contracts_block,
        links_block=links_block,
    )
