"""Generation driver. Renders every section and injects it into the docs.

The generate process:
1. Load the chain config once and validate it
2. Render each (tag, content) pair
3. Inject the pairs one tag at a time across the docs root

Later tags see the files as left by earlier ones. A failure on one tag
is recorded and the remaining tags still run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from chaindocs.chains.loader import doc_chains, load_chains
from chaindocs.chains.validator import validate_chains
from chaindocs.inject.injector import overwrite_generated
from chaindocs.inject.locator import MalformedRegionError
from chaindocs.render.card import supported_chains_cards
from chaindocs.render.details import chain_details_page, details_tag
from chaindocs.render.tables import (
    generate_all_chain_ids_table,
    generate_all_consistency_levels_table,
    generate_all_contracts_table,
)

logger = logging.getLogger(__name__)

# Contract address tags → contract key in the chain config
CONTRACT_TAGS = {
    "CORE_ADDRESS": "core",
    "TOKEN_BRIDGE_ADDRESS": "token_bridge",
    "NFT_BRIDGE_ADDRESS": "nft_bridge",
    "RELAYER_BRIDGE_ADDRESS": "wormhole_relayer",
    "CCTP_ADDRESS": "cctp",
}


def build_injections(
    chains: list[dict],
    chain_pages: bool = False,
) -> list[tuple[str, str]]:
    """Render all sections, in injection order."""
    injections = [("SUPPORTED_BLOCKCHAIN_CARDS", supported_chains_cards(chains))]

    for tag, contract in CONTRACT_TAGS.items():
        injections.append((tag, generate_all_contracts_table(chains, contract)))

    injections.append(("CONSISTENCY_LEVELS", generate_all_consistency_levels_table(chains)))
    injections.append(("CHAIN_IDS", generate_all_chain_ids_table(chains)))

    if chain_pages:
        for chain in doc_chains(chains):
            injections.append((details_tag(chain), chain_details_page(chain)))

    return injections


def generate_all(
    content_dir: Path | str | None = None,
    config_path: Path | str | None = None,
    dry_run: bool = False,
    chain_pages: bool = False,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Regenerate every tagged section under the docs root.

    Args:
        content_dir: Docs root. Defaults to ``CHAINDOCS_DOCS_DIR``.
        config_path: Chain config YAML. Defaults to ``CHAINDOCS_CONFIG``.
        dry_run: If True, don't write any file.
        chain_pages: Also inject per-chain ``<NAME>_CHAIN_DETAILS`` pages.
        tags: Restrict to these tags.

    Returns:
        Dict with updated/unchanged file paths, tags with no markers,
        per-tag errors, and the dry_run flag.

    Raises:
        RuntimeError: If the chain config fails validation.
    """
    chains = load_chains(config_path)

    val_result = validate_chains(chains)
    if not val_result.passed:
        raise RuntimeError(f"Chain config validation failed. Refusing to generate.\n{val_result.summary()}")
    for w in val_result.warnings:
        logger.warning(w)

    updated = []
    unchanged = []
    missing = []
    errors = []

    for tag, content in build_injections(chains, chain_pages=chain_pages):
        if tags and tag not in tags:
            continue
        try:
            res = overwrite_generated(tag, content, content_dir, dry_run=dry_run)
        except (MalformedRegionError, OSError) as e:
            logger.error("failed to inject %s: %s", tag, e)
            errors.append({"tag": tag, "error": str(e)})
            continue
        if not res.found:
            missing.append(tag)
        updated.extend(res.updated)
        unchanged.extend(res.unchanged)

    return {
        "updated": updated,
        "unchanged": unchanged,
        "missing": missing,
        "errors": errors,
        "dry_run": dry_run,
    }
