# =============================================================================
# wiki_core/wikipedia.py  —  One pipeline per tool
# =============================================================================
#
# Each function runs the same four steps:
#
#     build URL  →  fetch JSON  →  parse into a typed record  →  format text
#
# and returns the finished text block.  Failures are NOT handled here; they
# propagate to the tool wrapper, which owns the error message.
# =============================================================================

from typing import Optional

import httpx

from wiki_core import formatters, queries
from wiki_core.client import fetch_json
from wiki_core.errors import NotFoundError
from wiki_core.models import ArticleResponse, RandomResponse, SearchResponse

DEFAULT_LANG = "ja"
DEFAULT_LIMIT = 5
DEFAULT_COUNT = 5


async def search(
    query: str,
    lang: str = DEFAULT_LANG,
    limit: int = DEFAULT_LIMIT,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Keyword search.  Returns at most ``limit`` rendered hits."""
    url = queries.build_search_url(query, lang, limit)
    data = await fetch_json(url, client)
    return formatters.format_search(SearchResponse.from_dict(data), query, lang, limit)


async def get_article(
    title: str,
    lang: str = DEFAULT_LANG,
    include_content: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Article details for a single title.

    Raises:
        NotFoundError: the response carried no page map at all.  A page
            flagged ``missing`` is a normal result, not an error.
    """
    url = queries.build_article_url(title, lang, include_content)
    data = await fetch_json(url, client)
    page = ArticleResponse.from_dict(data).first_page()
    if page is None:
        raise NotFoundError("記事が見つかりません")
    return formatters.format_article(page, title, lang, include_content)


async def get_random(
    lang: str = DEFAULT_LANG,
    count: int = DEFAULT_COUNT,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Random main-namespace articles."""
    url = queries.build_random_url(lang, count)
    data = await fetch_json(url, client)
    return formatters.format_random(RandomResponse.from_dict(data), lang, count)
