"""Tag-bounded content injection.

Generated regions in documentation files are demarcated by a pair of
identical markers wrapping a tag name:

    Some hand-written text
    <!--CHAIN_IDS-->
    ...generated table...
    <!--CHAIN_IDS-->
    More hand-written text

Only the bytes between the two markers are ever replaced.
"""

MARKER_FMT = "<!--{tag}-->"


def marker(tag: str) -> bytes:
    """Return the byte-exact delimiter marker for a tag."""
    return MARKER_FMT.format(tag=tag).encode("utf-8")
