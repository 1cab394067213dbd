"""Generate CLI command."""

import argparse


def cmd_generate(args: argparse.Namespace) -> int:
    from chaindocs.generate import generate_all

    result = generate_all(
        content_dir=args.docs,
        config_path=args.config,
        dry_run=args.dry_run,
        chain_pages=args.chain_pages,
        tags=args.tag,
    )

    print("Documentation Generate Results")
    print("─" * 40)
    print(f"  Updated:   {len(result['updated'])}")
    print(f"  Unchanged: {len(result['unchanged'])}")
    if result["missing"]:
        print(f"  No tags:   {len(result['missing'])}")
        for tag in result["missing"]:
            print(f"    - {tag}")
    if result["errors"]:
        print(f"  Errors:    {len(result['errors'])}")
        for e in result["errors"]:
            print(f"    - {e['tag']}: {e['error']}")

    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")

    return 1 if result["errors"] else 0
