"""Supported chain cards."""

from __future__ import annotations

from chaindocs.chains.loader import doc_chains
from chaindocs.render import CHAIN_TYPE_TITLES, network_name
from chaindocs.render.templates import CARD, CARD_CONTAINER


def _links(extra: dict) -> str:
    links = []
    if extra.get("homepage"):
        links.append(f"[Homepage]({extra['homepage']})")
    if extra.get("explorer"):
        links.append(f"[Explorer]({extra['explorer']})")
    return " · ".join(links)


def chain_card(network: dict, chain_type: str) -> str:
    """Render a single card for a documented mainnet network."""
    extra = network.get("extra_details") or {}
    return CARD.format(
        title=extra.get("title") or network.get("name", "unknown"),
        chain_type=CHAIN_TYPE_TITLES.get(chain_type, chain_type),
        wormhole_id=network.get("id", "?"),
        description=extra.get("description", ""),
        links=_links(extra),
    )


def supported_chains_cards(chains: list[dict]) -> str:
    """Render the card container for every documented chain."""
    cards = []
    for chain in doc_chains(chains):
        mainnet = dict(chain["mainnet"])
        mainnet.setdefault("name", network_name(chain, mainnet))
        cards.append(chain_card(mainnet, chain.get("chain_type", "other")))
    return CARD_CONTAINER.format(cards="\n".join(cards))
