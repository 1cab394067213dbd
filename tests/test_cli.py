"""Tests for the chaindocs CLI.

Covers:
- Parser construction and argument parsing
- --help for all command groups
- generate, tags and chains commands against temp docs trees
"""

import argparse
from pathlib import Path
from unittest.mock import patch

import pytest

from chaindocs.cli import build_parser, main

FIXTURES = Path(__file__).parent / "fixtures"
CONFIG = str(FIXTURES / "chains-minimal.yaml")


# ── Parser construction ──────────────────────────────────────────


class TestParserConstruction:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_no_args_shows_help(self, capsys):
        rc = main([])
        assert rc == 0
        assert "chaindocs" in capsys.readouterr().out

    def test_generate_flags(self):
        args = build_parser().parse_args(
            ["generate", "--docs", "/tmp/d", "--tag", "A", "--tag", "B", "--dry-run"]
        )
        assert args.docs == "/tmp/d"
        assert args.tag == ["A", "B"]
        assert args.dry_run

    def test_options_after_subcommand(self):
        parser = build_parser()
        args = parser.parse_args(["tags", "find", "T", "--docs", "/tmp/d"])
        assert args.docs == "/tmp/d"
        args = parser.parse_args(["tags", "inject", "T", "--content", "x", "--docs", "/tmp/d"])
        assert args.docs == "/tmp/d"
        args = parser.parse_args(["chains", "validate", "--config", "c.yaml"])
        assert args.config == "c.yaml"
        args = parser.parse_args(["chains", "list", "--config", "c.yaml"])
        assert args.config == "c.yaml"

    def test_inject_requires_content_source(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["tags", "inject", "T"])


# ── Help output ──────────────────────────────────────────────────


class TestHelpOutput:
    @pytest.mark.parametrize("cmd", [
        ["--help"],
        ["generate", "--help"],
        ["tags", "--help"],
        ["tags", "find", "--help"],
        ["chains", "--help"],
    ])
    def test_help_exits_zero(self, cmd):
        parser = build_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(cmd)
        assert exc_info.value.code == 0

    def test_group_without_subcommand_shows_help(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["tags"])
        assert exc_info.value.code == 0


# ── Commands ─────────────────────────────────────────────────────


class TestGenerateCommand:
    def test_generate(self, docs, capsys):
        page = docs / "a.md"
        page.write_text("x\n<!--CHAIN_IDS-->\n<!--CHAIN_IDS-->\n")
        rc = main(["generate", "--docs", str(docs), "--config", CONFIG])
        out = capsys.readouterr().out
        assert rc == 0
        assert "Updated:   1" in out
        assert "SUPPORTED_BLOCKCHAIN_CARDS" in out
        assert "| Ethereum |" in page.read_text()

    def test_generate_errors_exit_one(self, docs, capsys):
        (docs / "a.md").write_text("x <!--CHAIN_IDS--> unclosed")
        rc = main(["generate", "--docs", str(docs), "--config", CONFIG])
        assert rc == 1
        assert "CHAIN_IDS" in capsys.readouterr().out

    def test_generate_dry_run(self, docs, capsys):
        page = docs / "a.md"
        page.write_text("x\n<!--CHAIN_IDS-->\n<!--CHAIN_IDS-->\n")
        main(["generate", "--docs", str(docs), "--config", CONFIG, "--dry-run"])
        assert "[DRY RUN]" in capsys.readouterr().out
        assert page.read_text() == "x\n<!--CHAIN_IDS-->\n<!--CHAIN_IDS-->\n"


class TestTagsCommands:
    def test_find(self, docs, capsys):
        (docs / "a.md").write_text("X <!--T--> old <!--T--> Y")
        rc = main(["tags", "find", "T", "--docs", str(docs)])
        out = capsys.readouterr().out
        assert rc == 0
        assert "start=10  stop=15" in out
        assert "1 file(s)" in out

    def test_find_malformed(self, docs, capsys):
        (docs / "a.md").write_text("X <!--T--> open")
        rc = main(["tags", "find", "T", "--docs", str(docs)])
        assert rc == 1
        assert "MALFORMED" in capsys.readouterr().out

    def test_find_missing_docs_dir(self, tmp_path, capsys):
        missing = tmp_path / "nope"
        rc = main(["tags", "find", "T", "--docs", str(missing)])
        assert rc == 1
        out = capsys.readouterr().out
        assert "ERROR" in out
        assert str(missing) in out

    def test_find_none(self, docs, capsys):
        rc = main(["tags", "find", "T", "--docs", str(docs)])
        assert rc == 0
        assert "No <!--T--> markers" in capsys.readouterr().out

    def test_inject_content(self, docs, capsys):
        f = docs / "a.txt"
        f.write_text("X <!--T--> old <!--T--> Y")
        rc = main(["tags", "inject", "T", "--content", "new", "--docs", str(docs)])
        assert rc == 0
        assert f.read_text() == "X <!--T-->\nnew\n<!--T--> Y"
        assert "updated" in capsys.readouterr().out

    def test_inject_from_file(self, docs, tmp_path):
        src = tmp_path / "content.md"
        src.write_text("| a |")
        f = docs / "a.txt"
        f.write_text("X <!--T--> old <!--T--> Y")
        main(["tags", "inject", "T", "--file", str(src), "--docs", str(docs)])
        assert f.read_text() == "X <!--T-->\n| a |\n<!--T--> Y"

    def test_inject_malformed(self, docs, capsys):
        f = docs / "a.txt"
        f.write_text("X <!--T--> open")
        rc = main(["tags", "inject", "T", "--content", "new", "--docs", str(docs)])
        assert rc == 1
        assert "ERROR" in capsys.readouterr().out
        assert f.read_text() == "X <!--T--> open"

    def test_inject_uses_env_docs_dir(self, docs, monkeypatch):
        monkeypatch.setenv("CHAINDOCS_DOCS_DIR", str(docs))
        f = docs / "a.txt"
        f.write_text("X <!--T--> old <!--T--> Y")
        with patch("sys.argv", ["chaindocs", "tags", "inject", "T", "--content", "z"]):
            rc = main()
        assert rc == 0
        assert f.read_text() == "X <!--T-->\nz\n<!--T--> Y"


class TestChainsCommands:
    def test_validate(self, capsys):
        rc = main(["chains", "validate", "--config", CONFIG])
        assert rc == 0
        assert "4 chains checked" in capsys.readouterr().out

    def test_validate_failure(self, tmp_path, capsys):
        cfg = tmp_path / "bad.yaml"
        cfg.write_text("chains:\n  - chain_type: evm\n")
        rc = main(["chains", "validate", "--config", str(cfg)])
        assert rc == 1
        assert "ERRORS" in capsys.readouterr().out

    def test_list(self, capsys):
        rc = main(["chains", "list", "--config", CONFIG])
        out = capsys.readouterr().out
        assert rc == 0
        assert "Ethereum" in out
        assert "mainnet, testnet" in out
        assert "4 chain(s)" in out
