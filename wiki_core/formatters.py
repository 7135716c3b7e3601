# =============================================================================
# wiki_core/formatters.py  —  Response Formatters
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the typed records from wiki_core/models.py into ONE display-ready
#   markdown text block per tool call.  This is where all the shaping rules
#   live:
#
#     search   →  every hit: bold title, tag-stripped snippet, size line, URL
#     article  →  header fields, then categories (10), links (10),
#                 images (5) and optionally the first 500 chars of wikitext
#     random   →  bold title + URL per article
#
# LIST LIMITS:
#   Categories, links and images are capped no matter how many the API
#   sends back.  The content excerpt is cut by character count (Python str
#   indexing), not by words or grapheme clusters.
#
# All output text is Japanese, matching the default "ja" edition.
# =============================================================================

import re
from typing import Optional

from wiki_core.models import ArticlePage, RandomResponse, SearchResponse
from wiki_core.queries import article_url

MAX_CATEGORIES = 10
MAX_LINKS = 10
MAX_IMAGES = 5
MAX_CONTENT_CHARS = 500
ELLIPSIS = "..."
CATEGORY_PREFIX = "Category:"
NO_SNIPPET = "説明なし"

_TAG_RE = re.compile(r"<[^>]*>")


def strip_tags(html: Optional[str]) -> str:
    """Remove every ``<...>`` sequence (search highlight spans and the like)."""
    if not html:
        return ""
    return _TAG_RE.sub("", html)


def truncate(text: str, limit: int = MAX_CONTENT_CHARS) -> str:
    """First ``limit`` characters, plus an ellipsis only if something was cut."""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


# -----------------------------------------------------------------------------
# search_wikipedia
# -----------------------------------------------------------------------------
def search_not_found(query: str) -> str:
    return f'検索結果が見つかりませんでした: "{query}"'


def format_search(response: SearchResponse, query: str, lang: str, limit: Optional[int] = None) -> str:
    results = response.results if limit is None else response.results[:limit]
    if not results:
        return search_not_found(query)

    paragraphs = []
    for result in results:
        snippet = strip_tags(result.snippet) or NO_SNIPPET
        paragraphs.append(
            f"**{result.title}**\n"
            f"{snippet}\n"
            f"記事サイズ: {result.size}文字 | 単語数: {result.wordcount}\n"
            f"URL: {article_url(lang, result.title)}\n"
        )
    body = "\n---\n\n".join(paragraphs)
    return f"Wikipedia検索結果 ({len(results)}件):\n\n{body}"


# -----------------------------------------------------------------------------
# get_wikipedia_article
# -----------------------------------------------------------------------------
def article_not_found(title: str) -> str:
    return f'記事が見つかりませんでした: "{title}"'


def _bullet_section(heading: str, items: list[str]) -> str:
    if not items:
        return ""
    lines = "".join(f"- {item}\n" for item in items)
    return f"**{heading}**\n{lines}\n"


def format_article(page: ArticlePage, title: str, lang: str, include_content: bool = False) -> str:
    """Render one page.

    ``title`` is the title the caller asked for; it is only used for the
    "not found" message.  Everything else comes from ``page``.
    """
    if page.missing:
        return article_not_found(title)

    parts = [f"**{page.title}**\n\n"]
    if page.pageid is not None:
        parts.append(f"記事ID: {page.pageid}\n")
    if page.touched:
        parts.append(f"最終更新: {page.touched}\n")
    if page.length is not None:
        parts.append(f"記事サイズ: {page.length}文字\n")
    parts.append(f"URL: {article_url(lang, page.title)}\n\n")

    categories = [c.title.replace(CATEGORY_PREFIX, "", 1) for c in page.categories[:MAX_CATEGORIES]]
    parts.append(_bullet_section("カテゴリ:", categories))
    parts.append(_bullet_section(f"関連記事 (最初の{MAX_LINKS}件):", [link.title for link in page.links[:MAX_LINKS]]))
    parts.append(_bullet_section(f"使用画像 (最初の{MAX_IMAGES}件):", [i.title for i in page.images[:MAX_IMAGES]]))

    if include_content and page.revisions:
        parts.append(f"**記事内容 (最初の{MAX_CONTENT_CHARS}文字):**\n")
        parts.append(truncate(page.revisions[0]))

    return "".join(parts)


# -----------------------------------------------------------------------------
# get_random_wikipedia
# -----------------------------------------------------------------------------
RANDOM_EMPTY = "ランダム記事を取得できませんでした"


def format_random(response: RandomResponse, lang: str, count: Optional[int] = None) -> str:
    articles = response.articles if count is None else response.articles[:count]
    if not articles:
        return RANDOM_EMPTY

    entries = [f"**{a.title}**\nURL: {article_url(lang, a.title)}" for a in articles]
    body = "\n\n".join(entries)
    return f"ランダム記事 ({len(articles)}件):\n\n{body}"
