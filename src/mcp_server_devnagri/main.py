#!/usr/bin/env python
"""
Command line entry point for the Devnagri MCP server.
"""
import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from mcp_server_devnagri import __version__
from mcp_server_devnagri.server import SERVER_NAME, create_mcp_server
from mcp_server_devnagri.settings import DevnagriSettings, ToolSettings
from mcp_server_devnagri.tools.multilingual import DevnagriTranslator

logger = logging.getLogger(__name__)

LOG_FORMAT = "[devnagri-translation] [%(levelname)s] %(message)s"

MISSING_KEY_MESSAGE = """\
Warning: No Devnagri API key found!
Please provide an API key in one of the following ways:
1. As a command line argument: mcp-server-devnagri API_KEY="your_api_key"
2. As an environment variable: DEVNAGRI_API_KEY=your_api_key mcp-server-devnagri
3. In a .env file in your current directory
"""


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr, stdout carries the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mcp-server-devnagri",
        description=f"{SERVER_NAME}: MCP tools for the Devnagri translation API",
    )
    parser.add_argument(
        "assignments",
        nargs="*",
        metavar='API_KEY="..."',
        help="API key given as API_KEY=<key>",
    )
    parser.add_argument("--api-key", help="Devnagri API key")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="MCP transport to serve on (default: stdio)",
    )
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def api_key_from_args(args: argparse.Namespace) -> Optional[str]:
    """
    Find an API key given on the command line.

    ``API_KEY=<key>`` tokens take precedence over ``--api-key``. Double
    quotes around the key are stripped.
    """
    for assignment in args.assignments:
        name, sep, value = assignment.partition("=")
        if sep and name == "API_KEY":
            return value.replace('"', "") or None
    return args.api_key or None


def load_settings(args: argparse.Namespace) -> DevnagriSettings:
    """
    Merge command line options over environment variables and ``.env``.
    """
    overrides: Dict[str, Any] = {}
    api_key = api_key_from_args(args)
    if api_key:
        overrides["api_key"] = api_key
    if args.log_level:
        overrides["log_level"] = args.log_level
    return DevnagriSettings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings(args)

    if not settings.api_key:
        sys.stderr.write(MISSING_KEY_MESSAGE)
        return 1

    configure_logging(settings.log_level)

    translator = DevnagriTranslator(
        api_key=settings.api_key,
        api_url=settings.api_url,
        timeout=settings.request_timeout,
    )
    mcp = create_mcp_server(translator, ToolSettings())

    logger.info(f"Starting {SERVER_NAME} on {args.transport}")
    try:
        mcp.run(transport=args.transport)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
