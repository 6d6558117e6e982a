# backend/notion_blog/notion/blocks.py

"""
Notion のブロック一覧を Content レコードの配列に平坦化する。

- 対応する type: paragraph / heading_2 / heading_3 / quote / code
- それ以外の type、type を持たない部分オブジェクトは読み飛ばす
- 1 ブロックにつき Content は高々 1 件
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from notion_blog.blog.schemas import CodeContent, Content, TextContent

from .properties import first_plain_text

logger = logging.getLogger(__name__)

TEXT_BLOCK_TYPES = ("paragraph", "heading_2", "heading_3", "quote")
CODE_BLOCK_TYPE = "code"


def flatten_block(block: Dict[str, Any]) -> Optional[Content]:
    """
    ブロック 1 件を Content に変換する。未対応の type は None を返す。
    """
    block_type = block.get("type")
    if not isinstance(block_type, str):
        return None

    body = block.get(block_type)
    if not isinstance(body, dict):
        body = {}

    text = first_plain_text(body.get("rich_text"))

    if block_type in TEXT_BLOCK_TYPES:
        return TextContent(type=block_type, text=text)

    if block_type == CODE_BLOCK_TYPE:
        language = body.get("language")
        return CodeContent(
            text=text,
            language=language if isinstance(language, str) else None,
        )

    return None


def flatten_blocks(blocks: Iterable[Dict[str, Any]]) -> List[Content]:
    """
    ブロック一覧を元の順序のまま Content の配列にする。
    """
    contents: List[Content] = []
    skipped = 0

    for block in blocks:
        content = flatten_block(block) if isinstance(block, dict) else None
        if content is None:
            skipped += 1
            continue
        contents.append(content)

    if skipped:
        logger.debug("Skipped unsupported blocks. count=%d", skipped)

    return contents
