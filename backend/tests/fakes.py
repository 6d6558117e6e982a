# backend/tests/fakes.py
"""
Notion API レスポンス形式のテストデータと、NotionClient の代替実装。
"""

from typing import Any, Dict, List, Optional


def rich_text(text: str) -> List[Dict[str, Any]]:
    return [{"type": "text", "plain_text": text, "text": {"content": text}}]


def make_page(
    page_id: str,
    *,
    title: Optional[str] = None,
    slug: Optional[str] = None,
    created_time: str = "2023-01-01T00:00:00.000Z",
    last_edited_time: str = "2023-01-02T03:04:05.000Z",
) -> Dict[str, Any]:
    return {
        "object": "page",
        "id": page_id,
        "created_time": created_time,
        "last_edited_time": last_edited_time,
        "properties": {
            "Name": {"type": "title", "title": rich_text(title) if title else []},
            "Slug": {"type": "rich_text", "rich_text": rich_text(slug) if slug else []},
            "document": {"type": "checkbox", "checkbox": True},
        },
    }


def make_block(block_type: str, text: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"rich_text": rich_text(text) if text is not None else []}
    body.update(extra)
    return {"object": "block", "id": f"block-{block_type}", "type": block_type, block_type: body}


class FakeNotionClient:
    """
    query_documents / list_block_children だけを持つ NotionClient の代替。
    """

    def __init__(
        self,
        pages: List[Dict[str, Any]],
        blocks: Optional[Dict[str, List[Dict[str, Any]]]] = None,
    ) -> None:
        self.pages = pages
        self.blocks = blocks or {}
        self.query_calls = 0
        self.block_calls: List[str] = []

    def query_documents(self) -> List[Dict[str, Any]]:
        self.query_calls += 1
        return list(self.pages)

    def list_block_children(self, block_id: str) -> List[Dict[str, Any]]:
        self.block_calls.append(block_id)
        return list(self.blocks.get(block_id, []))
