"""Start the YouTube search MCP server on stdio.

Logging goes to stderr because stdout carries the protocol.  Example
client configuration::

    "command": "python",
    "args": ["main.py"]
"""

from __future__ import annotations

import logging
import sys

from server import mcp
from utils import config

logger = logging.getLogger("youtube_search")


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()
    logger.info("YouTube Search MCP Server running...")
    mcp.run()


if __name__ == "__main__":
    main()
