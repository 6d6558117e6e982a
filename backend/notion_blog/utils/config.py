# backend/notion_blog/utils/config.py

"""
環境変数読み取り用のユーティリティ。

notion.config（NOTION_TOKEN など）と blog.config（BLOG_* 系）から使う。
"""

import os
from typing import Optional


class EnvVarMissingError(RuntimeError):
    """NOTION_TOKEN など必須の環境変数が空または未設定のときの例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> str:
    """
    環境変数 name を読む。空文字は未設定と同じ扱い。

    required=True なら未設定時に EnvVarMissingError、
    required=False なら default を返す。
    """
    value = os.getenv(name)
    if value:
        return value

    if required:
        raise EnvVarMissingError(name)
    return default


def get_env_int(name: str, default: Optional[int]) -> Optional[int]:
    """
    整数の環境変数を読む（NOTION_PAGE_SIZE, BLOG_REVALIDATE_SECONDS など）。

    未設定 or パース不能の場合は default を返す。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    try:
        return int(raw)
    except ValueError:
        return default
