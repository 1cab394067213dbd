"""Unified CLI for chaindocs.

Usage:
    chaindocs generate [--docs DIR] [--config FILE] [--dry-run] [--chain-pages] [--tag TAG ...]
    chaindocs tags find <tag> [--docs DIR]
    chaindocs tags inject <tag> (--content TEXT | --file PATH) [--docs DIR] [--dry-run]
    chaindocs chains validate [--config FILE]
    chaindocs chains list [--config FILE]
"""

import argparse
import logging
import sys

from chaindocs.cli.chains import cmd_chains_list, cmd_chains_validate
from chaindocs.cli.generate import cmd_generate
from chaindocs.cli.tags import cmd_tags_find, cmd_tags_inject


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chaindocs",
        description="Regenerate tagged sections of chain documentation",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # generate
    gen = sub.add_parser("generate", help="Render and inject all generated sections")
    gen.add_argument(
        "--docs", default=None,
        help="Docs root directory (default: $CHAINDOCS_DOCS_DIR)",
    )
    gen.add_argument(
        "--config", default=None,
        help="Chain config YAML (default: $CHAINDOCS_CONFIG)",
    )
    gen.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    gen.add_argument(
        "--chain-pages", action="store_true",
        help="Also inject <NAME>_CHAIN_DETAILS pages",
    )
    gen.add_argument(
        "--tag", action="append", default=None,
        help="Only inject this tag (repeatable)",
    )

    # tags
    docs_opt = argparse.ArgumentParser(add_help=False)
    docs_opt.add_argument(
        "--docs", default=None,
        help="Docs root directory (default: $CHAINDOCS_DOCS_DIR)",
    )

    tags = sub.add_parser("tags", help="Tag marker operations")
    tags_sub = tags.add_subparsers(dest="subcommand")

    find = tags_sub.add_parser(
        "find", parents=[docs_opt], help="List files containing a tag",
    )
    find.add_argument("tag")

    inject = tags_sub.add_parser(
        "inject", parents=[docs_opt], help="Inject content for a single tag",
    )
    inject.add_argument("tag")
    source = inject.add_mutually_exclusive_group(required=True)
    source.add_argument("--content", default=None, help="Content to inject")
    source.add_argument("--file", default=None, help="Read content from file")
    inject.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    # chains
    config_opt = argparse.ArgumentParser(add_help=False)
    config_opt.add_argument(
        "--config", default=None,
        help="Chain config YAML (default: $CHAINDOCS_CONFIG)",
    )

    chains = sub.add_parser("chains", help="Chain config operations")
    chains_sub = chains.add_subparsers(dest="subcommand")
    chains_sub.add_parser("validate", parents=[config_opt], help="Validate the chain config")
    chains_sub.add_parser("list", parents=[config_opt], help="List configured chains")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("tags", "find"): cmd_tags_find,
        ("tags", "inject"): cmd_tags_inject,
        ("chains", "validate"): cmd_chains_validate,
        ("chains", "list"): cmd_chains_list,
    }

    # Handle top-level commands (no subcommand)
    if args.command == "generate":
        return cmd_generate(args)

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
