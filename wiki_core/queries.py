# =============================================================================
# wiki_core/queries.py  —  Query Builders
# =============================================================================
#
# One builder per tool.  Each returns a complete URL for the Action API of
# the requested language edition:
#
#     https://<lang>.wikipedia.org/w/api.php?format=json&action=query&...
#
# The language is chosen by SUBDOMAIN, never by a query parameter.  A bad
# language code is not checked here: the remote host (or DNS) rejects it
# and the error surfaces through the normal failure message.
#
# ENCODING:
#   User-supplied text (search keywords, titles) is percent-encoded the way
#   JavaScript's encodeURIComponent does it, so URLs match the ones the
#   Wikipedia web UI produces.  Fixed parameter values such as
#   "snippet|size|wordcount|timestamp" are written literally.
# =============================================================================

from urllib.parse import quote

# Characters encodeURIComponent leaves alone, besides ASCII alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"

SEARCH_PROPS = "snippet|size|wordcount|timestamp"
ARTICLE_PROPS = "info|categories|links|images"
MAIN_NAMESPACE = 0


def encode_component(text: str) -> str:
    """Percent-encode ``text`` for use inside a URL query or path segment."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def api_base(lang: str) -> str:
    return f"https://{lang}.wikipedia.org/w/api.php?format=json&action=query"


def article_url(lang: str, title: str) -> str:
    """Human-facing page URL, e.g. https://ja.wikipedia.org/wiki/%E6%9D%B1%E4%BA%AC."""
    return f"https://{lang}.wikipedia.org/wiki/{encode_component(title)}"


def build_search_url(query: str, lang: str, limit: int) -> str:
    return (
        f"{api_base(lang)}&list=search"
        f"&srsearch={encode_component(query)}"
        f"&srlimit={limit}"
        f"&srprop={SEARCH_PROPS}"
    )


def build_article_url(title: str, lang: str, include_content: bool = False) -> str:
    props = ARTICLE_PROPS
    if include_content:
        # rvprop rides along inside the prop value, as its own parameter
        props += "|revisions&rvprop=content"
    return f"{api_base(lang)}&prop={props}&titles={encode_component(title)}"


def build_random_url(lang: str, count: int) -> str:
    return f"{api_base(lang)}&list=random&rnnamespace={MAIN_NAMESPACE}&rnlimit={count}"
