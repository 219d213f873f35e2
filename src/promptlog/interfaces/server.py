"""MCP server wiring: registers the tool functions on a FastMCP instance."""

from __future__ import annotations

import logging

from collections.abc import Callable

from mcp.server.fastmcp import FastMCP

from promptlog.interfaces.tools import (
    ASK_WEATHER_DESCRIPTION,
    GET_CITY_WEATHER_DESCRIPTION,
    GET_PROMPT_DESCRIPTION,
    GET_RANDOM_NUMBER_DESCRIPTION,
    SAVE_PROMPT_DESCRIPTION,
    ask_weather,
    get_city_weather,
    get_prompt,
    get_random_number,
    save_prompt,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "prompt-logger"

VALID_TRANSPORTS = frozenset({"stdio", "sse", "streamable-http"})


_TOOLS: tuple[tuple[Callable[..., str], str, str], ...] = (
    (save_prompt, "save_prompt", SAVE_PROMPT_DESCRIPTION),
    (get_prompt, "get_prompt", GET_PROMPT_DESCRIPTION),
    (get_city_weather, "get_city_weather", GET_CITY_WEATHER_DESCRIPTION),
    (ask_weather, "ask_weather", ASK_WEATHER_DESCRIPTION),
    (get_random_number, "get_random_number", GET_RANDOM_NUMBER_DESCRIPTION),
)


def build_server() -> FastMCP:
    """Create the server and register every tool."""
    server = FastMCP(SERVER_NAME)
    for fn, name, description in _TOOLS:
        server.add_tool(fn, name=name, description=description)
        logger.debug("Registered tool %s", name)
    return server
