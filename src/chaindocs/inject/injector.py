"""Overwrite tag-bounded regions with freshly rendered content.

For each tag:
1. Locate every marker pair under the docs root
2. Refuse the whole tag if any file has an unclosed marker
3. Re-read each file and splice the new content between head and tail

Bytes outside the marked region are preserved exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from chaindocs.inject.locator import MalformedRegionError, Match, find_tag
from chaindocs.paths import docs_dir

logger = logging.getLogger(__name__)


@dataclass
class InjectionResult:
    """Result of injecting one tag across the docs tree."""

    tag: str
    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    dry_run: bool = False

    @property
    def found(self) -> bool:
        return bool(self.updated or self.unchanged)


def splice(data: bytes, match: Match, content: str) -> bytes:
    """Replace ``data[start:stop]`` with the content framed by newlines."""
    if match.stop is None:
        raise MalformedRegionError(match.path)
    head = data[: match.start]
    tail = data[match.stop :]
    return head + f"\n{content}\n".encode("utf-8") + tail


def overwrite_generated(
    tag: str,
    content: str,
    content_dir: Path | str | None = None,
    dry_run: bool = False,
) -> InjectionResult:
    """Overwrite every region bounded by ``<!--tag-->`` with ``content``.

    Args:
        tag: Tag naming the content slot.
        content: Rendered text to inject. Not escaped.
        content_dir: Docs root. Defaults to ``chaindocs.paths.docs_dir()``.
        dry_run: If True, compute changes but don't write.

    Returns:
        InjectionResult listing updated and unchanged files. No files are
        listed when the tag was not found anywhere.

    Raises:
        MalformedRegionError: If any file has an opening marker with no
            closing marker. Raised before any file is written.
        OSError: On read/write failure. Files already written stay written.
    """
    root = Path(content_dir) if content_dir else docs_dir()
    result = InjectionResult(tag=tag, dry_run=dry_run)

    matches = find_tag(root, tag)
    if not matches:
        logger.warning("no tags for %s", tag)
        return result

    for match in matches:
        if match.malformed:
            raise MalformedRegionError(match.path, tag)

    for match in matches:
        old_file = match.path.read_bytes()
        new_file = splice(old_file, match, content)
        if new_file == old_file:
            result.unchanged.append(str(match.path))
            continue
        if not dry_run:
            match.path.write_bytes(new_file)
        logger.debug("injected %s into %s", tag, match.path)
        result.updated.append(str(match.path))

    return result
