"""Command line entry point for opening symbols from URIs.

Examples:
    symbol-opener open "symbol-opener://open?symbol=Foo&cwd=/src/app&kind=Class" \
        --root /src/app --index /src/app/.symbols.json
    symbol-opener resume --root /src/app --index /src/app/.symbols.json
"""

import argparse
import asyncio
import subprocess
import sys
from pathlib import Path

from symbol_opener.errors import ConfigError
from symbol_opener.handler import SymbolOpener
from symbol_opener.json_state_store import DEFAULT_STATE_PATH, JsonStateStore
from symbol_opener.load_config import load_config
from symbol_opener.local_host import LocalHost
from symbol_opener.logging_setup import configure_logging
from symbol_opener.models import NotFound
from symbol_opener.settings import Settings, settings_from_config


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for both subcommands."""
    ap = argparse.ArgumentParser(
        description="Resolve a symbol through the workspace symbol index and open it.",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--state",
        type=Path,
        default=DEFAULT_STATE_PATH,
        help=f"Shared state file for pending requests (default: {DEFAULT_STATE_PATH})",
    )
    ap.add_argument(
        "--index",
        type=Path,
        default=Path(".symbols.json"),
        help="JSON snapshot of workspace symbols (default: .symbols.json)",
    )
    ap.add_argument(
        "--root",
        action="append",
        default=[],
        help="Open project root; repeat for multi-root workspaces (default: cwd)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    open_cmd = sub.add_parser("open", help="Handle an open-symbol URI")
    open_cmd.add_argument("uri", help="symbol-opener://open?symbol=...&cwd=...[&kind=...]")

    sub.add_parser("resume", help="Process a pending request left by another instance")
    return ap


def _settings_loader(config_path: str | None) -> Settings:
    return settings_from_config(load_config(config_path))


async def run(args: argparse.Namespace) -> int:
    """Run one subcommand and map the result to an exit code."""
    settings = _settings_loader(args.config)
    configure_logging(settings.log_level)

    roots = args.root or [str(Path.cwd())]
    host = LocalHost(roots, args.index, editor_command=settings.editor_command)
    opener = SymbolOpener(
        host, JsonStateStore(args.state), lambda: _settings_loader(args.config)
    )

    if args.command == "resume":
        await opener.on_startup()
        return 1 if opener.last_error is not None else 0

    outcome = await opener.handle_uri(args.uri)
    if opener.last_error is not None or isinstance(outcome, NotFound):
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the requested subcommand."""
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args))
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except (OSError, subprocess.CalledProcessError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
