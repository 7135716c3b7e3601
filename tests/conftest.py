"""Shared fixtures: canned MediaWiki Action API payloads."""
import pytest


@pytest.fixture
def search_payload():
    return {
        "batchcomplete": "",
        "query": {
            "searchinfo": {"totalhits": 2},
            "search": [
                {
                    "ns": 0,
                    "title": "東京都",
                    "pageid": 1234,
                    "size": 98765,
                    "wordcount": 4321,
                    "snippet": '<span class="searchmatch">東京</span>都は日本の首都',
                    "timestamp": "2024-05-01T12:00:00Z",
                },
                {
                    "ns": 0,
                    "title": "東京タワー",
                    "pageid": 5678,
                    "size": 3000,
                    "wordcount": 120,
                    "snippet": "",
                    "timestamp": "2024-04-01T08:30:00Z",
                },
            ],
        },
    }


@pytest.fixture
def article_payload():
    return {
        "batchcomplete": "",
        "query": {
            "pages": {
                "1234": {
                    "pageid": 1234,
                    "ns": 0,
                    "title": "東京都",
                    "touched": "2024-05-02T00:00:00Z",
                    "length": 98765,
                    "categories": [{"ns": 14, "title": f"Category:カテゴリ{i}"} for i in range(15)],
                    "links": [{"ns": 0, "title": f"リンク{i}"} for i in range(12)],
                    "images": [{"ns": 6, "title": f"ファイル:画像{i}.jpg"} for i in range(8)],
                    "revisions": [{"contentformat": "text/x-wiki", "*": "あ" * 600}],
                }
            }
        },
    }


@pytest.fixture
def missing_payload():
    return {
        "batchcomplete": "",
        "query": {"pages": {"-1": {"ns": 0, "title": "存在しない記事", "missing": ""}}},
    }


@pytest.fixture
def random_payload():
    return {
        "batchcomplete": "",
        "query": {
            "random": [
                {"id": 1, "ns": 0, "title": "記事A"},
                {"id": 2, "ns": 0, "title": "記事B"},
                {"id": 3, "ns": 0, "title": "記事C"},
            ]
        },
    }
