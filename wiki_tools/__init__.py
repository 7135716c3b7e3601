# =============================================================================
# wiki_tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   wiki_tools/ is the translation layer between the MCP host and the
#   wiki_core/ pipelines.  Each tool:
#     1. Declares its argument shape (types, defaults, descriptions)
#     2. Calls one pipeline from wiki_core/wikipedia.py
#     3. Turns any raised error into a text message
#
# Tools do NOT build URLs or format responses; that is wiki_core's job.
# =============================================================================
