# =============================================================================
# wiki_tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the three Wikipedia tools on a FastMCP server.  Each tool is a
#   thin wrapper around a wiki_core/wikipedia.py pipeline: it re-applies
#   defaults, logs the call, and converts ANY failure into a text message.
#
# HOW IT WORKS (the flow):
#   1. The MCP host calls a tool by name (e.g. "search_wikipedia")
#   2. FastMCP validates the arguments against the annotated signature
#   3. The decorated function below runs the matching core pipeline
#   4. The returned str is sent back as a single text content block
#
# FAILURE ENVELOPE:
#   No tool ever raises.  Every exception from the pipeline (HttpError,
#   DecodeError, NotFoundError, httpx transport errors, KeyError from a
#   malformed payload) is caught once, here, and returned as
#       "<tool-specific phrase>: <error message>"
#
# TOOLS:
#   search_wikipedia       → keyword search
#   get_wikipedia_article  → article details (+ optional wikitext excerpt)
#   get_random_wikipedia   → random main-namespace articles
#
# RUNNING THIS SERVER:
#     a) Via the entry point:  wikipedia-mcp   (or: python main.py)
#     b) Standalone:           python -m wiki_tools.mcp_server
# =============================================================================

import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from wiki_core import wikipedia
from wiki_core.wikipedia import DEFAULT_COUNT, DEFAULT_LANG, DEFAULT_LIMIT

logger = logging.getLogger(__name__)

# =============================================================================
# Logging helpers
# =============================================================================
# Logging goes to STDERR (configured in main.py).  STDOUT carries the MCP
# JSON-RPC stream and must never receive log lines.
#
# Colors:  CYAN = incoming call,  YELLOW = status,  GREEN = response
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def _log_request(tool_name: str, **params) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log a one-line summary of the response, then return it unchanged."""
    first_line = text.split("\n", 1)[0]
    logger.info(f"{_GREEN}  ← {tool_name} response ({len(text)} chars): {first_line}{_RESET}")
    return text


def _failure(tool_name: str, phrase: str, error: Exception) -> str:
    # Some httpx timeouts carry an empty message; name the error instead.
    message = str(error) or type(error).__name__
    logger.warning("%s failed: %s: %s", tool_name, type(error).__name__, message)
    return _log_response(tool_name, f"{phrase}: {message}")


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP(
    "mcp-wikipedia-api",
    version="1.0.0",
    instructions="Search and read Wikipedia articles in any language edition.",
)

LangParam = Annotated[str, Field(description="Language code (ja, en, etc.)")]


# =============================================================================
# TOOL 1: search_wikipedia
# =============================================================================
@mcp.tool()
async def search_wikipedia(
    query: Annotated[str, Field(min_length=1, description="Search keyword")],
    lang: LangParam = DEFAULT_LANG,
    limit: Annotated[int, Field(ge=1, description="Number of search results")] = DEFAULT_LIMIT,
) -> str:
    """Search Wikipedia articles by keyword（キーワードでWikipedia記事を検索する）

    Returns one paragraph per hit: title, plain-text snippet, article size,
    word count and URL.
    """
    lang = lang or DEFAULT_LANG
    limit = limit or DEFAULT_LIMIT
    _log_request("search_wikipedia", query=query, lang=lang, limit=limit)

    try:
        text = await wikipedia.search(query, lang, limit)
    except Exception as e:
        return _failure("search_wikipedia", "Wikipedia検索に失敗しました", e)
    return _log_response("search_wikipedia", text)


# =============================================================================
# TOOL 2: get_wikipedia_article
# =============================================================================
# include_content (off by default) appends the first 500 characters of the
# raw wikitext.
# =============================================================================
@mcp.tool()
async def get_wikipedia_article(
    title: Annotated[str, Field(min_length=1, description="Article title")],
    lang: LangParam = DEFAULT_LANG,
    include_content: Annotated[
        bool, Field(description="Include article content (wikitext)")
    ] = False,
) -> str:
    """Get detailed information about a Wikipedia article（Wikipedia記事の詳細情報を取得する）

    Returns the page id, last-touched time, size and URL, followed by up to
    10 categories, 10 linked articles and 5 images.
    """
    lang = lang or DEFAULT_LANG
    include_content = bool(include_content)
    _log_request("get_wikipedia_article", title=title, lang=lang, include_content=include_content)

    try:
        text = await wikipedia.get_article(title, lang, include_content)
    except Exception as e:
        return _failure("get_wikipedia_article", "記事取得に失敗しました", e)
    return _log_response("get_wikipedia_article", text)


# =============================================================================
# TOOL 3: get_random_wikipedia
# =============================================================================
@mcp.tool()
async def get_random_wikipedia(
    lang: LangParam = DEFAULT_LANG,
    count: Annotated[int, Field(ge=1, description="Number of random articles to get")] = DEFAULT_COUNT,
) -> str:
    """Get random Wikipedia articles（ランダムなWikipedia記事を取得する）

    Only main-namespace articles are returned (no talk, user or category
    pages).
    """
    lang = lang or DEFAULT_LANG
    count = count or DEFAULT_COUNT
    _log_request("get_random_wikipedia", lang=lang, count=count)

    try:
        text = await wikipedia.get_random(lang, count)
    except Exception as e:
        return _failure("get_random_wikipedia", "ランダム記事取得に失敗しました", e)
    return _log_response("get_random_wikipedia", text)


# =============================================================================
# Server entry point
# =============================================================================
def run() -> None:
    """Serve the tools over stdio until the host closes the stream."""
    _log_status("Wikipedia MCP Server running on stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    # Same startup as the console script: .env, LOG_LEVEL, fatal-error exit.
    from main import main

    main()
