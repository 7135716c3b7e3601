"""Tool-level tests through an in-memory FastMCP client.

fetch_json is patched so no network is touched; these cover argument
defaults, the text envelope and the failure messages.
"""
import runpy
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastmcp import Client

from wiki_core.errors import DecodeError, HttpError
from wiki_tools.mcp_server import mcp

TOOL_NAMES = {"search_wikipedia", "get_wikipedia_article", "get_random_wikipedia"}


def _input_schema(tool):
    # Newer fastmcp releases rename inputSchema to input_schema
    schema = getattr(tool, "input_schema", None)
    return schema if schema is not None else tool.inputSchema


async def _call(name, arguments):
    async with Client(mcp) as client:
        result = await client.call_tool(name, arguments)
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


@pytest.mark.asyncio
async def test_exactly_three_tools_registered():
    async with Client(mcp) as client:
        tools = await client.list_tools()

    assert {t.name for t in tools} == TOOL_NAMES
    schemas = {t.name: _input_schema(t) for t in tools}
    assert schemas["search_wikipedia"]["required"] == ["query"]
    assert schemas["search_wikipedia"]["properties"]["lang"]["default"] == "ja"
    assert schemas["search_wikipedia"]["properties"]["limit"]["default"] == 5
    assert schemas["get_wikipedia_article"]["properties"]["include_content"]["default"] is False
    assert schemas["get_random_wikipedia"]["properties"]["count"]["default"] == 5
    assert "required" not in schemas["get_random_wikipedia"] or not schemas["get_random_wikipedia"]["required"]


@pytest.mark.asyncio
@patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock)
async def test_search_applies_defaults(mock_fetch, search_payload):
    mock_fetch.return_value = search_payload
    text = await _call("search_wikipedia", {"query": "東京"})

    url = mock_fetch.call_args[0][0]
    assert url.startswith("https://ja.wikipedia.org/")
    assert "&srlimit=5&" in url
    assert text.startswith("Wikipedia検索結果 (2件):")


@pytest.mark.asyncio
@patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock)
async def test_search_no_results_uses_raw_query(mock_fetch):
    mock_fetch.return_value = {"batchcomplete": "", "query": {"search": []}}
    text = await _call("search_wikipedia", {"query": "a b&c", "lang": "en"})
    assert text == '検索結果が見つかりませんでした: "a b&c"'


@pytest.mark.asyncio
@patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock)
async def test_article_missing(mock_fetch, missing_payload):
    mock_fetch.return_value = missing_payload
    text = await _call("get_wikipedia_article", {"title": "存在しない記事"})
    assert text == '記事が見つかりませんでした: "存在しない記事"'


@pytest.mark.asyncio
@patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock)
async def test_article_with_content(mock_fetch, article_payload):
    mock_fetch.return_value = article_payload
    text = await _call("get_wikipedia_article", {"title": "東京都", "include_content": True})

    assert "|revisions&rvprop=content" in mock_fetch.call_args[0][0]
    assert text.endswith("あ" * 500 + "...")


@pytest.mark.asyncio
@patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock)
async def test_article_without_page_map_reports_failure(mock_fetch):
    mock_fetch.return_value = {"batchcomplete": ""}
    text = await _call("get_wikipedia_article", {"title": "何か"})
    assert text == "記事取得に失敗しました: 記事が見つかりません"


@pytest.mark.asyncio
@patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock)
async def test_random_count(mock_fetch, random_payload):
    mock_fetch.return_value = random_payload
    text = await _call("get_random_wikipedia", {"count": 3})

    assert "&rnlimit=3" in mock_fetch.call_args[0][0]
    assert text.startswith("ランダム記事 (3件):")
    assert text.count("URL: ") == 3


@pytest.mark.asyncio
@patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock)
async def test_random_empty(mock_fetch):
    mock_fetch.return_value = {"query": {"random": []}}
    text = await _call("get_random_wikipedia", {})
    assert text == "ランダム記事を取得できませんでした"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, arguments, phrase",
    [
        ("search_wikipedia", {"query": "東京"}, "Wikipedia検索に失敗しました"),
        ("get_wikipedia_article", {"title": "東京"}, "記事取得に失敗しました"),
        ("get_random_wikipedia", {}, "ランダム記事取得に失敗しました"),
    ],
)
async def test_http_failure_becomes_text(name, arguments, phrase):
    with patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock) as mock_fetch:
        mock_fetch.side_effect = HttpError(503, "Service Unavailable")
        text = await _call(name, arguments)
    assert text == f"{phrase}: Wikipedia API request failed: 503 Service Unavailable"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [DecodeError("bad body"), httpx.ConnectError("Name or service not known")],
)
async def test_other_failures_become_text(error):
    with patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock) as mock_fetch:
        mock_fetch.side_effect = error
        text = await _call("search_wikipedia", {"query": "x", "lang": "zz-invalid"})
    assert text == f"Wikipedia検索に失敗しました: {error}"


@pytest.mark.asyncio
@patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock)
async def test_malformed_payload_becomes_text(mock_fetch):
    mock_fetch.return_value = {"query": {"search": [{"ns": 0}]}}
    text = await _call("search_wikipedia", {"query": "x"})
    assert text.startswith("Wikipedia検索に失敗しました: ")


@pytest.mark.asyncio
async def test_empty_error_message_falls_back_to_error_name():
    with patch("wiki_core.wikipedia.fetch_json", new_callable=AsyncMock) as mock_fetch:
        mock_fetch.side_effect = httpx.ReadTimeout("")
        text = await _call("get_random_wikipedia", {})
    assert text == "ランダム記事取得に失敗しました: ReadTimeout"


@patch("main.main")
def test_module_entry_point_uses_main(mock_main):
    runpy.run_module("wiki_tools.mcp_server", run_name="__main__")
    mock_main.assert_called_once_with()
