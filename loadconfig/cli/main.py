"""
CLI entry point for the loadconfig command.

Usage:
    loadconfig -f /etc/loadconfig/main.cfg
    loadconfig -v -f main.cfg --vars defaults.json --dump
    loadconfig -f main.cfg --varserver-url http://127.0.0.1:8085
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from ..api.variables import VarStore
from ..core.config import AppConfig, VarServerConfig, load_config
from ..core.errors import ConfigError, IntegrationError
from ..core.logging import configure_logging, get_logger
from ..integrations.template import DollarTemplateEngine
from ..integrations.varserver import InMemoryVarStore, VarServerStore
from ..loader import ConfigLoader

logger = get_logger("loadconfig.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loadconfig",
        description="Load system variables from configuration files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-f",
        dest="filename",
        required=True,
        help="configuration file",
    )

    parser.add_argument(
        "-v",
        dest="verbose",
        action="store_true",
        help="verbose output",
    )

    parser.add_argument(
        "-w",
        dest="workbuf_size",
        type=int,
        default=None,
        help="working buffer size (default: from LOADCONFIG_WORKBUF_SIZE or 8192)",
    )

    parser.add_argument(
        "--varserver-url",
        type=str,
        default=None,
        help="variable server URL (default: LOADCONFIG_VARSERVER_URL, else in-memory)",
    )

    parser.add_argument(
        "--vars",
        type=str,
        default=None,
        help="JSON file of initial variables for the in-memory store",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="in-memory store rejects variables not present in --vars",
    )

    parser.add_argument(
        "--dump",
        action="store_true",
        help="print all variables after loading",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="print the load result as JSON",
    )

    return parser


def _apply_args(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Overlay command line options on the environment configuration."""
    loader_cfg = config.loader
    if args.verbose:
        loader_cfg = replace(loader_cfg, verbose=True)
    if args.workbuf_size is not None:
        if args.workbuf_size <= 0:
            raise ConfigError("working buffer size must be positive")
        loader_cfg = replace(loader_cfg, workbuf_size=args.workbuf_size)

    varserver_cfg = config.varserver
    if args.varserver_url:
        if varserver_cfg is None:
            varserver_cfg = VarServerConfig(base_url=args.varserver_url)
        else:
            varserver_cfg = replace(varserver_cfg, base_url=args.varserver_url)

    logging_cfg = config.logging
    if loader_cfg.verbose and logging_cfg.log_level.upper() not in ("DEBUG", "INFO"):
        logging_cfg = replace(logging_cfg, log_level="INFO")

    return AppConfig(loader=loader_cfg, logging=logging_cfg, varserver=varserver_cfg)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _apply_args(load_config(), args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    configure_logging(config.logging)

    store: VarStore
    try:
        if config.varserver is not None:
            store = VarServerStore.from_config(config)
        elif args.vars:
            store = InMemoryVarStore.from_json_file(args.vars, strict=args.strict)
        else:
            store = InMemoryVarStore(strict=args.strict)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    loader = ConfigLoader(store, DollarTemplateEngine(store), config.loader)
    result = loader.load(args.filename)

    if args.json:
        print(result.to_json())

    if args.dump:
        try:
            variables = store.snapshot()
        except IntegrationError as e:
            logger.error("Cannot list variables: %s", e)
            return 1
        for name, value in sorted(variables.items()):
            print(f"{name} {value}")

    if not result.success:
        logger.error("Configuration load failed with %d error(s)", len(result.issues))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
