"""Markdown templates for generated sections.

Templates use str.format() with named placeholders.
"""

from __future__ import annotations

# ── Supported chain cards ────────────────────────────────────────

CARD = """\
<div class="card" markdown>
**{title}**

{chain_type} | Wormhole ID `{wormhole_id}`

{description}

{links}
</div>"""

CARD_CONTAINER = """
<div class="card-container" markdown>
{cards}
</div>
  """

# ── Environment tabs ─────────────────────────────────────────────

ENV_TAB = """\
=== "{env_title}"

{body}"""

# ── Chain details page ───────────────────────────────────────────

DETAILS_PAGE = """\
# {title}

{description}

**Chain type:** {chain_type}

## Networks

{networks_table}

## Contracts

{contracts_block}

## Resources

{links_block}"""
