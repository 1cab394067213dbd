"""Locate tag-bounded regions across a documentation tree."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from chaindocs.inject import marker


class MalformedRegionError(ValueError):
    """An opening marker was found without a matching closing marker."""

    def __init__(self, path: Path | str, tag: str | None = None) -> None:
        self.path = str(path)
        self.tag = tag
        what = f"<!--{tag}-->" if tag else "marker"
        super().__init__(f"{self.path}: opening {what} has no closing marker")


@dataclass(frozen=True)
class Match:
    """A replaceable byte region in one file.

    ``start`` is the offset right after the opening marker. ``stop`` is the
    offset where the closing marker begins, or None when the file has no
    closing marker.
    """

    path: Path
    start: int
    stop: int | None

    @property
    def malformed(self) -> bool:
        return self.stop is None


def scan_file(path: Path, tag: str) -> Match | None:
    """Look for the first marker pair for ``tag`` in a single file.

    A marker at offset 0 counts as not found.
    """
    full_tag = marker(tag)
    data = path.read_bytes()

    start_idx = data.find(full_tag, 0)
    if start_idx <= 0:
        return None

    stop_idx = data.find(full_tag, start_idx + 1)
    return Match(
        path=path,
        start=start_idx + len(full_tag),
        stop=stop_idx if stop_idx != -1 else None,
    )


def find_tag(content_dir: Path | str, tag: str) -> list[Match]:
    """Walk ``content_dir`` depth-first and collect a Match per tagged file.

    Args:
        content_dir: Root of the documentation tree.
        tag: Tag name, without the comment wrapping.

    Returns:
        One Match per file containing the tag's marker. Order across files
        is not part of the contract.

    Raises:
        ValueError: If ``tag`` is empty.
        OSError: If a directory or file cannot be read.
    """
    if not tag:
        raise ValueError("tag must be a non-empty string")

    root = Path(content_dir)
    if not root.is_dir():
        raise NotADirectoryError(f"Docs directory not found: {root}")

    matches: list[Match] = []
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            matches.extend(find_tag(entry, tag))
        elif entry.is_file():
            match = scan_file(entry, tag)
            if match is not None:
                matches.append(match)

    return matches
