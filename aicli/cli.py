import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import ConfigStore, get_config_store
from .handlers import handle_config, handle_generate
from .logger import setup_logging


def _build_generate_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aicli",
        description="AI-powered CLI tool that converts natural language to shell commands.",
        epilog="Run 'aicli config --help' to manage the API key and model.",
    )
    parser.add_argument("instruction", type=str, nargs="?", help="Natural language instruction to convert to a shell command.")
    parser.add_argument("--verbose", action="store_true", help="Show informational log messages.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_config_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aicli config", description="Configure the CLI tool.")
    parser.add_argument("--set-api-key", metavar="KEY", dest="api_key", help="Set OpenAI API key.")
    parser.add_argument("--set-model", metavar="MODEL", dest="model", help="Set OpenAI model (default: gpt-4o-mini).")
    parser.add_argument("--view", action="store_true", help="View current configuration.")
    parser.add_argument("--verbose", action="store_true", help="Show informational log messages.")
    return parser


def run_cli(argv: Optional[List[str]] = None, store: Optional[ConfigStore] = None) -> int:
    """Parse the command line, dispatch to a handler and return the exit code."""
    argv = sys.argv[1:] if argv is None else argv
    store = store or get_config_store()

    if argv and argv[0] == "config":
        args = _build_config_parser().parse_args(argv[1:])
        setup_logging(verbose=args.verbose)
        return handle_config(store, api_key=args.api_key, model=args.model, view=args.view)

    args = _build_generate_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    return handle_generate(args.instruction, store)
