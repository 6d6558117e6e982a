# backend/notion_blog/blog/config.py

"""
ブログの描画・再生成に関する設定値。
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from notion_blog.utils.config import get_env, get_env_int

DEFAULT_REVALIDATE_SECONDS = 60


@dataclass(frozen=True)
class BlogConfig:
    """ブログ用の設定値コンテナ。"""

    title: str = "Blog"
    timezone: str = "Asia/Tokyo"
    revalidate_seconds: Optional[int] = DEFAULT_REVALIDATE_SECONDS


@lru_cache()
def get_blog_config() -> BlogConfig:
    """
    環境変数からブログ設定を読み込む。

    任意:
      - BLOG_TITLE              (デフォルト: Blog)
      - BLOG_TIMEZONE           (デフォルト: Asia/Tokyo)
      - BLOG_REVALIDATE_SECONDS (デフォルト: 60, 0 以下なら再生成しない)
    """
    revalidate = get_env_int(
        "BLOG_REVALIDATE_SECONDS",
        default=DEFAULT_REVALIDATE_SECONDS,
    )
    if revalidate is not None and revalidate <= 0:
        revalidate = None

    return BlogConfig(
        title=get_env("BLOG_TITLE", default="Blog", required=False),
        timezone=get_env("BLOG_TIMEZONE", default="Asia/Tokyo", required=False),
        revalidate_seconds=revalidate,
    )
