# backend/notion_blog/notion/properties.py

"""
Notion ページのプロパティから値を取り出すヘルパー。

プロパティが存在しない / 型が違う / 中身が空のいずれの場合も
例外にはせず None を返す。
"""

from typing import Any, Dict, Optional

TITLE_PROPERTY = "Name"
SLUG_PROPERTY = "Slug"


def first_plain_text(rich_text: Any) -> Optional[str]:
    """
    rich_text 配列の先頭セグメントの plain_text を返す。
    """
    if not isinstance(rich_text, list) or not rich_text:
        return None

    first = rich_text[0]
    if not isinstance(first, dict):
        return None

    text = first.get("plain_text")
    if isinstance(text, str):
        return text
    return None


def _typed_property_text(
    page: Dict[str, Any],
    name: str,
    expected_type: str,
) -> Optional[str]:
    """
    properties[name] の type が expected_type のときだけ、その先頭テキストを返す。
    """
    properties = page.get("properties")
    if not isinstance(properties, dict):
        return None

    prop = properties.get(name)
    if not isinstance(prop, dict) or prop.get("type") != expected_type:
        return None

    return first_plain_text(prop.get(expected_type))


def get_title(page: Dict[str, Any]) -> Optional[str]:
    """Name（title プロパティ）を取り出す。"""
    return _typed_property_text(page, TITLE_PROPERTY, "title")


def get_slug(page: Dict[str, Any]) -> Optional[str]:
    """Slug（rich_text プロパティ）を取り出す。"""
    return _typed_property_text(page, SLUG_PROPERTY, "rich_text")
