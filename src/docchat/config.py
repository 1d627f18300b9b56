"""
Client Configuration

Settings come from environment variables with defaults and can be
overridden on the command line.

Environment:
    CHAT_HOST       server host (default 127.0.0.1)
    CHAT_PORT       server port (default 7777)
    CHAT_LOG_FILE   log file path (default chat_client.log)
    CHAT_LOG_LEVEL  log level name (default WARNING)
"""

import argparse
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .transport import DEFAULT_HOST, DEFAULT_PORT

DEFAULT_LOG_FILE = "chat_client.log"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class ClientConfig:
    """
    Runtime configuration of the chat client.

    Attributes:
        host: Server host name or address
        port: Server TCP port
        log_file: Path of the log file
        log_level: Name of the logging level
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_file: str = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL


def port_number(value: str) -> int:
    """Parse a TCP port for argparse."""
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def build_parser(environ: Optional[Mapping[str, str]] = None):
    """
    Create the command line parser.

    Defaults are taken from the environment so that command line options
    win over environment variables.
    """
    env = os.environ if environ is None else environ

    parser = argparse.ArgumentParser(
        prog="chat-client",
        description="Shared-document chat client",
    )
    parser.add_argument(
        "--host",
        default=env.get("CHAT_HOST", DEFAULT_HOST),
        help="Chat server host",
    )
    parser.add_argument(
        "--port",
        type=port_number,
        default=env.get("CHAT_PORT", str(DEFAULT_PORT)),
        help="Chat server port",
    )
    parser.add_argument(
        "--log-file",
        default=env.get("CHAT_LOG_FILE", DEFAULT_LOG_FILE),
        help="File to write logs to",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=env.get("CHAT_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        help="Logging level",
    )
    return parser


def parse_args(
    argv: Optional[List[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ClientConfig:
    """
    Build the client configuration.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        environ: Environment mapping (defaults to os.environ)

    Returns:
        The resulting ClientConfig
    """
    args = build_parser(environ).parse_args(argv)
    return ClientConfig(
        host=args.host,
        port=args.port,
        log_file=args.log_file,
        log_level=args.log_level,
    )
