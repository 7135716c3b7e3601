# =============================================================================
# wiki_core/__init__.py
# =============================================================================
# This package contains ALL Wikipedia-facing logic: URL construction, the
# HTTP fetcher, typed response records, and the text formatters.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any other protocol layer.
#   Every public function either returns a string or raises one of the
#   errors in wiki_core.errors.  Turning errors into tool output is the
#   job of wiki_tools/.
# =============================================================================
