"""Documentation path resolution.

Resolves the docs root and chain config locations. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    CHAINDOCS_DOCS_DIR: documentation snippets root (default: ../wormhole-docs/.snippets/text)
    CHAINDOCS_CONFIG: chain config YAML (default: ./chains.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

# Relative to where `chaindocs generate` is run
_DEFAULT_DOCS_DIR = Path("..") / "wormhole-docs" / ".snippets" / "text"
_DEFAULT_CONFIG = Path("chains.yaml")


def docs_dir() -> Path:
    """Return the documentation root scanned for tags."""
    return Path(os.environ.get("CHAINDOCS_DOCS_DIR", str(_DEFAULT_DOCS_DIR)))


def chains_config_path() -> Path:
    """Return the path to the chain config YAML."""
    env = os.environ.get("CHAINDOCS_CONFIG")
    if env:
        return Path(env)
    return _DEFAULT_CONFIG
