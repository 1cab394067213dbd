"""Tag inspection and one-off injection commands."""

import argparse
from pathlib import Path

from chaindocs.inject.injector import overwrite_generated
from chaindocs.inject.locator import MalformedRegionError, find_tag
from chaindocs.paths import docs_dir


def cmd_tags_find(args: argparse.Namespace) -> int:
    root = Path(args.docs) if args.docs else docs_dir()
    try:
        matches = find_tag(root, args.tag)
    except OSError as e:
        print(f"ERROR: {e}")
        return 1

    if not matches:
        print(f"No <!--{args.tag}--> markers under {root}")
        return 0

    malformed = 0
    for m in matches:
        if m.malformed:
            malformed += 1
            print(f"  {m.path}  start={m.start}  MALFORMED (no closing marker)")
        else:
            print(f"  {m.path}  start={m.start}  stop={m.stop}")
    print(f"\n  {len(matches)} file(s)")
    return 1 if malformed else 0


def cmd_tags_inject(args: argparse.Namespace) -> int:
    if args.file:
        content = Path(args.file).read_text(encoding="utf-8")
    else:
        content = args.content

    try:
        result = overwrite_generated(args.tag, content, args.docs, dry_run=args.dry_run)
    except (MalformedRegionError, OSError) as e:
        print(f"ERROR: {e}")
        return 1

    if not result.found:
        print(f"No <!--{args.tag}--> markers found.")
        return 0

    for path in result.updated:
        print(f"  updated    {path}")
    for path in result.unchanged:
        print(f"  unchanged  {path}")
    if result.dry_run:
        print("\n[DRY RUN] No files were modified.")
    return 0
