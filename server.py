"""Shared ``FastMCP`` instance for the YouTube search server.

Tool modules import ``mcp`` from here and register themselves with
``@mcp.tool()``; importing the tool modules at the bottom completes
the registration.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from utils import config

mcp = FastMCP(config.SERVER_NAME)

from tools import youtube_tools  # noqa: E402,F401
