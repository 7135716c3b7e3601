# =============================================================================
# main.py  —  Entry Point for the Wikipedia MCP Server
# =============================================================================
#
# HOW TO RUN:
#   wikipedia-mcp            (console script installed by pyproject.toml)
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads environment variables from .env (if present)
#   2. Configures logging to STDERR at LOG_LEVEL (default INFO)
#   3. Starts the FastMCP server on stdio (wiki_tools/mcp_server.py)
#   4. Serves tool calls until the host closes the stream
#
# If startup fails, the error is logged and the process exits with status 1.
#
# ENVIRONMENT:
#   LOG_LEVEL             → DEBUG, INFO, WARNING, ...
#   WIKIPEDIA_USER_AGENT  → overrides the User-Agent sent to Wikipedia
# =============================================================================

import logging
import os
import sys

from dotenv import load_dotenv

logger = logging.getLogger("wikipedia_mcp")


def configure_logging() -> None:
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main() -> None:
    load_dotenv()
    configure_logging()

    try:
        from wiki_tools.mcp_server import run

        run()
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
