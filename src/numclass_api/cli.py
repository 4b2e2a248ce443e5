# src/numclass_api/cli.py

"""
numclass-api - Number classification service

Description:
    Classifies an integer (prime, perfect, Armstrong, parity, digit sum),
    adds a fun fact from a numbers-trivia service and serves the result over
    HTTP. The same classification is available on the command line.

usage: numclass-api -h
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import textwrap
from dataclasses import replace

from colorama import Fore, Style, just_fix_windows_console

from numclass_api import __version__
from numclass_api.classify import classify, evaluate
from numclass_api.config import Settings, load_settings
from numclass_api.display import print_classification, print_json, show_classifier_list
from numclass_api.facts import FactProvider, fallback_fact
from numclass_api.observability import setup_logging
from numclass_api.registry import default_index
from numclass_api.utility import UserInputError, parse_int_strict

logger = logging.getLogger(__name__)


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    commands:
      serve
          Run the HTTP API (GET /api/classify-number?number=N).

      classify N
          Classify N in the terminal.

      list
          List all available classifiers.
    """)

    p = argparse.ArgumentParser(
        prog="numclass-api",
        description="Number classification API — properties & fun facts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("--config", default=None, help="TOML settings file (default: $NUMCLASS_API_CONFIG)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--debug", action="store_true", help="Verbose logging and full tracebacks")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("serve", help="run the HTTP API")
    s.add_argument("--host", default=None, help="bind address (default from settings)")
    s.add_argument("--port", type=int, default=None, help="bind port (default from settings)")

    c = sub.add_parser("classify", help="classify one integer")
    c.add_argument("value", help="integer to classify")
    c.add_argument("--json", action="store_true", help="print the API response body")
    c.add_argument("--no-fact", action="store_true", help="skip the fun-fact lookup")
    c.add_argument("--no-details", action="store_true", help="omit classifier details")

    sub.add_parser("list", help="list available classifiers")
    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except UserInputError as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        debug = "--debug" in (argv if argv is not None else sys.argv)
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- commands ----
def _cmd_serve(args, settings: Settings) -> int:
    import uvicorn

    from numclass_api.api import create_app

    if args.host:
        settings = replace(settings, host=args.host)
    if args.port is not None:
        settings = replace(settings, port=args.port)

    app = create_app(settings)
    # logging is already configured; uvicorn loggers propagate to the root handler
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None, access_log=False)
    return 0


def _cmd_classify(args, settings: Settings) -> int:
    n = parse_int_strict(args.value, allow_negative=settings.allow_negative)
    index = default_index()
    result = classify(n, index)

    if args.no_fact:
        fact = fallback_fact(n)
    else:
        fact = asyncio.run(FactProvider(settings.fact_url, settings.fact_timeout).get(n))
    result = result.with_fun_fact(fact)

    if args.json:
        print_json(result)
    else:
        print_classification(result, evaluate(n, index), show_details=not args.no_details)
    return 0


def _cmd_list(args, settings: Settings) -> int:
    show_classifier_list(default_index())
    return 0


_COMMANDS = {
    "serve": _cmd_serve,
    "classify": _cmd_classify,
    "list": _cmd_list,
}


def _main_impl(argv=None) -> int:
    just_fix_windows_console()

    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    if args.debug:
        settings = replace(settings, debug=True, log_level="DEBUG")
    setup_logging(settings.log_level, settings.log_format)
    logger.debug("Settings: %s", settings)

    return _COMMANDS[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
