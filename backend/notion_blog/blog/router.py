# backend/notion_blog/blog/router.py

"""
ブログ用の FastAPI ルーター定義。

- /                 一覧ページ（HTML）
- /latest           最新記事ページ（HTML）
- /posts/{slug}     記事ページ（HTML）
- /api/posts        一覧ページ props（JSON）
- /api/posts/latest 最新記事ページ props（JSON）
"""

import logging
from typing import Callable, TypeVar

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from .renderer import BlogRenderer
from .schemas import PostListProps, PostProps
from .state import PageCache, get_page_cache, get_renderer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["blog"])

T = TypeVar("T")


def _load(loader: Callable[[], T], page: str) -> T:
    """
    props を読み込む。想定外の例外は 500 としてクライアントに返す（詳細はログ側で確認）。
    """
    try:
        return loader()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Failed to build page props. page=%s", page)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch posts from Notion.",
        ) from exc


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="記事一覧ページ",
)
def index_page(
    cache: PageCache = Depends(get_page_cache),
    renderer: BlogRenderer = Depends(get_renderer),
) -> HTMLResponse:
    props = _load(cache.index.get, "index")
    return HTMLResponse(renderer.render_index(props))


@router.get(
    "/latest",
    response_class=HTMLResponse,
    summary="最新記事ページ",
)
def latest_post_page(
    cache: PageCache = Depends(get_page_cache),
    renderer: BlogRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """
    最新の document ページを描画する。記事が無い場合も空のページを返す。
    """
    props = _load(cache.latest.get, "latest")
    return HTMLResponse(renderer.render_post(props))


@router.get(
    "/posts/{slug}",
    response_class=HTMLResponse,
    summary="記事ページ",
)
def post_page(
    slug: str,
    cache: PageCache = Depends(get_page_cache),
    renderer: BlogRenderer = Depends(get_renderer),
) -> HTMLResponse:
    props = _load(lambda: cache.get_post(slug), f"posts/{slug}")
    if props.post is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found.",
        )
    return HTMLResponse(renderer.render_post(props))


@router.get(
    "/api/posts",
    response_model=PostListProps,
    summary="記事一覧ページの props",
)
def index_props(cache: PageCache = Depends(get_page_cache)) -> PostListProps:
    return _load(cache.index.get, "api/posts")


@router.get(
    "/api/posts/latest",
    response_model=PostProps,
    summary="最新記事ページの props",
)
def latest_post_props(cache: PageCache = Depends(get_page_cache)) -> PostProps:
    return _load(cache.latest.get, "api/posts/latest")
