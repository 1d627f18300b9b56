#!/usr/bin/env python3
"""
Chat Client Application

Client application for the shared-document chat service.
Provides a terminal-based user interface using the Textual framework.
"""

import logging
import sys
from typing import List, Optional

from .config import ClientConfig, parse_args

logger = logging.getLogger(__name__)


def configure_logging(config: ClientConfig) -> None:
    """Configure logging to a file to avoid interfering with the UI."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(config.log_file, mode="a")],
    )


def main(argv: Optional[List[str]] = None):
    """Main entry point for the chat client."""
    config = parse_args(argv)
    configure_logging(config)
    logger.info(
        "Starting chat client for %s:%d...", config.host, config.port
    )

    try:
        from .ui import ChatApp
    except ImportError as e:
        print(f"Error: Could not import UI components: {e}")
        print("Make sure textual is installed: pip install textual")
        sys.exit(1)

    app = ChatApp(config)
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)

    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
