# =============================================================================
# wiki_core/errors.py  —  Error kinds raised by the core layer
# =============================================================================
#
# Every error raised here propagates untouched out of wiki_core.  The tool
# wrappers in wiki_tools/mcp_server.py catch them (along with anything
# httpx raises) and render a text message instead.
#
# "Page marked missing" is NOT an error: it is a normal result and gets its
# own message from the formatter.  NotFoundError is reserved for responses
# that carry no page map at all.
# =============================================================================


class WikipediaError(Exception):
    """Base class for failures talking to the Wikipedia API."""


class HttpError(WikipediaError):
    """The API answered with a non-2xx status."""

    def __init__(self, status: int, reason: str):
        self.status = status
        self.reason = reason
        super().__init__(f"Wikipedia API request failed: {status} {reason}")


class DecodeError(WikipediaError):
    """The response body could not be parsed as JSON."""


class NotFoundError(WikipediaError):
    """The article response had no page map."""
