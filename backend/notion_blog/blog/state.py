# backend/notion_blog/blog/state.py

"""
ページ props キャッシュの共有状態を管理するモジュール。

- アプリ全体で共有する BlogService / BlogRenderer / PageCache を提供
- テスト時にリセットできるようにする
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Dict, Optional

from .cache import RevalidatingCache
from .renderer import BlogRenderer
from .schemas import PostListProps, PostProps
from .service import BlogService


class PageCache:
    """
    一覧ページ・記事ページごとの RevalidatingCache をまとめて持つ。

    - 一覧ページ: BlogService.config.revalidate_seconds ごとに再生成
    - 最新記事ページ: 初回生成のみ（再生成しない）
    - slug 指定の記事ページ: 一覧ページの記事から引き、初回の結果を使い続ける
    """

    def __init__(
        self,
        service: BlogService,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.service = service
        self.index: RevalidatingCache[PostListProps] = RevalidatingCache(
            service.build_index_props,
            service.config.revalidate_seconds,
            clock=clock,
        )
        self.latest: RevalidatingCache[PostProps] = RevalidatingCache(
            service.build_post_props,
            None,
            clock=clock,
        )
        self._posts: Dict[str, PostProps] = {}
        self._lock = threading.Lock()

    def get_post(self, slug: str) -> PostProps:
        """
        slug ごとの記事 props を返す。

        一覧ページのキャッシュから記事を探すため、存在しない slug への
        リクエストで Notion API を呼び直すことはない（一覧の再生成時を除く）。
        見つからなかった結果は、一覧の再生成後に再判定できるよう保持しない。
        """
        with self._lock:
            props = self._posts.get(slug)
        if props is not None:
            return props

        for post in self.index.get().posts:
            if post.slug == slug:
                props = PostProps(post=post, revalidate=None)
                with self._lock:
                    return self._posts.setdefault(slug, props)

        return PostProps(post=None, revalidate=None)


_page_cache: Optional[PageCache] = None
_renderer: Optional[BlogRenderer] = None


def get_page_cache() -> PageCache:
    """
    共有の PageCache インスタンスを返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _page_cache
    if _page_cache is None:
        _page_cache = PageCache(BlogService())
    return _page_cache


def get_renderer() -> BlogRenderer:
    """共有の BlogRenderer インスタンスを返す。"""
    global _renderer
    if _renderer is None:
        _renderer = BlogRenderer()
    return _renderer


def reset_state() -> None:
    """
    テスト用にシングルトン状態をリセットする。
    """
    global _page_cache, _renderer
    _page_cache = None
    _renderer = None
