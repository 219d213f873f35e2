"""Console entry point.

Runs the MCP server by default. ``--manual-save [TEXT]`` bypasses the
server and saves TEXT (or stdin, when omitted) once, which is handy for
checking repository configuration by hand.

Usage:
    REPO_PATH=~/prompts promptlog
    REPO_PATH=~/prompts promptlog --manual-save "Remember to buy milk"
"""

from __future__ import annotations

import logging
import os
import sys

from promptlog.shared.exceptions import ConfigurationError, PromptLogError

logger = logging.getLogger(__name__)

_MANUAL_SAVE_FLAG = "--manual-save"


def _configure_logging() -> None:
    # stdout carries MCP protocol messages; logs must go to stderr.
    level = os.environ.get("PROMPTLOG_LOG_LEVEL", "INFO").strip().upper()
    if level not in logging.getLevelNamesMapping():
        level = "INFO"
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _manual_save(argv: list[str]) -> int:
    """Save one prompt without starting the server. Returns an exit code."""
    from promptlog.interfaces.tools import save_prompt

    idx = argv.index(_MANUAL_SAVE_FLAG)
    if idx + 1 < len(argv) and not argv[idx + 1].startswith("--"):
        text = argv[idx + 1]
    else:
        print("Enter prompt text, finish with EOF (Ctrl+D):", file=sys.stderr)
        text = sys.stdin.read()

    output = save_prompt(text)
    print(output, file=sys.stderr)
    return 1 if output.startswith("Error:") else 0


def _serve() -> None:
    from promptlog.interfaces.server import VALID_TRANSPORTS, build_server

    transport = os.environ.get("MCP_TRANSPORT", "stdio").strip().lower()
    if transport not in VALID_TRANSPORTS:
        valid = ", ".join(sorted(VALID_TRANSPORTS))
        msg = f"Unknown MCP_TRANSPORT: {transport!r} (valid: {valid})"
        raise ConfigurationError(msg)

    logger.info("Starting prompt-logger MCP server (transport=%s)", transport)
    build_server().run(transport=transport)


def main(argv: list[str] | None = None) -> None:
    """Dispatch to manual save or the MCP server."""
    _configure_logging()
    args = sys.argv[1:] if argv is None else argv

    try:
        if _MANUAL_SAVE_FLAG in args:
            sys.exit(_manual_save(args))
        _serve()
    except PromptLogError as e:
        logger.error("promptlog failed: %s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
