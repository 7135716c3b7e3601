# =============================================================================
# wiki_core/models.py  —  Typed response records (one set per endpoint)
# =============================================================================
#
# The MediaWiki Action API returns loosely-typed JSON: most fields are
# optional, and the interesting part is nested under "query".  Each record
# below turns one of those shapes into a dataclass with explicit Optional
# fields, so the formatters check for presence instead of poking at dicts.
#
# CONSTRUCTION RULES:
#   - Fields the API always sends (title, ns, ...) are read with data[key].
#     If they are absent a KeyError escapes and the tool reports a failure.
#   - Optional fields default to None or an empty list.
#   - Every record is built once per tool call and thrown away afterwards.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


# -----------------------------------------------------------------------------
# list=search
# -----------------------------------------------------------------------------
@dataclass
class SearchResult:
    """One hit from list=search."""

    ns: int
    title: str
    pageid: int
    size: int
    wordcount: int
    snippet: Optional[str] = None      # HTML-marked excerpt; may be absent
    timestamp: Optional[str] = None    # ISO 8601 last edit time

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchResult":
        return cls(
            ns=data["ns"],
            title=data["title"],
            pageid=data["pageid"],
            size=data["size"],
            wordcount=data["wordcount"],
            snippet=data.get("snippet"),
            timestamp=data.get("timestamp"),
        )


@dataclass
class SearchResponse:
    results: list[SearchResult] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchResponse":
        query = data.get("query") or {}
        return cls(results=[SearchResult.from_dict(r) for r in query.get("search") or []])


# -----------------------------------------------------------------------------
# prop=info|categories|links|images[|revisions]
# -----------------------------------------------------------------------------
@dataclass
class PageRef:
    """A namespaced page reference: a category, a link or an image file."""

    ns: int
    title: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageRef":
        return cls(ns=data.get("ns", 0), title=data["title"])


def _revision_text(data: dict[str, Any]) -> Optional[str]:
    # Legacy JSON puts the wikitext under "*"; formatversion=2 uses "content".
    if "*" in data:
        return data["*"]
    return data.get("content")


@dataclass
class ArticlePage:
    """A single page from a prop=info query.

    When ``missing`` is true the API knows nothing about the title and
    every other field should be ignored.
    """

    ns: int
    title: str
    pageid: Optional[int] = None
    touched: Optional[str] = None
    length: Optional[int] = None
    missing: bool = False
    categories: list[PageRef] = field(default_factory=list)
    links: list[PageRef] = field(default_factory=list)
    images: list[PageRef] = field(default_factory=list)
    revisions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArticlePage":
        # The legacy format flags missing pages with "missing": "" (an empty
        # string), formatversion=2 with "missing": true.  Presence is the flag.
        missing = "missing" in data and data["missing"] is not False
        revisions = [_revision_text(r) for r in data.get("revisions") or []]
        return cls(
            ns=data.get("ns", 0),
            title=data["title"],
            pageid=data.get("pageid"),
            touched=data.get("touched"),
            length=data.get("length"),
            missing=missing,
            categories=[PageRef.from_dict(c) for c in data.get("categories") or []],
            links=[PageRef.from_dict(link) for link in data.get("links") or []],
            images=[PageRef.from_dict(i) for i in data.get("images") or []],
            revisions=[r for r in revisions if r is not None],
        )


@dataclass
class ArticleResponse:
    # None means the response had no page map at all (not the same as a
    # page that exists in the map but is flagged missing).
    pages: Optional[dict[str, ArticlePage]] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArticleResponse":
        query = data.get("query") or {}
        raw_pages = query.get("pages")
        if not raw_pages:
            return cls(pages=None)
        # formatversion=2 returns a list instead of a pageid-keyed map
        if isinstance(raw_pages, list):
            raw_pages = {str(p.get("pageid", i)): p for i, p in enumerate(raw_pages)}
        return cls(pages={pid: ArticlePage.from_dict(p) for pid, p in raw_pages.items()})

    def first_page(self) -> Optional[ArticlePage]:
        """Return the first (for a single-title lookup, the only) page."""
        if not self.pages:
            return None
        return next(iter(self.pages.values()))


# -----------------------------------------------------------------------------
# list=random
# -----------------------------------------------------------------------------
@dataclass
class RandomArticle:
    id: int
    ns: int
    title: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RandomArticle":
        return cls(id=data["id"], ns=data.get("ns", 0), title=data["title"])


@dataclass
class RandomResponse:
    articles: list[RandomArticle] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RandomResponse":
        query = data.get("query") or {}
        return cls(articles=[RandomArticle.from_dict(a) for a in query.get("random") or []])
