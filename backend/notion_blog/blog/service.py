# backend/notion_blog/blog/service.py

"""
Notion クライアントとブログ用スキーマをつなぐサービス層。

- document フラグ付きページの取得 → Post への変換
- 各ページのブロック取得 → Content 配列への変換（並列）
- 一覧ページ / 記事ページの props 構築
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from notion_blog.notion.blocks import flatten_blocks
from notion_blog.notion.client import NotionClient
from notion_blog.notion.properties import get_slug, get_title

from .config import BlogConfig, get_blog_config
from .schemas import Content, Post, PostListProps, PostProps

logger = logging.getLogger(__name__)


def page_to_post(page: Dict[str, Any]) -> Post:
    """
    Notion のページオブジェクトを contents 空の Post に変換する。

    properties を持たない部分オブジェクトの場合は、id 以外すべて None になる。
    """
    page_id = page.get("id", "")

    if "properties" not in page:
        return Post(id=page_id)

    return Post(
        id=page_id,
        title=get_title(page),
        slug=get_slug(page),
        created_ts=page.get("created_time"),
        last_edited_ts=page.get("last_edited_time"),
    )


class BlogService:
    """
    NotionClient を利用して、ページ描画に必要な props を組み立てるサービス。

    - 一覧ページ: 全記事 + 本文、revalidate 付き
    - 記事ページ: 最新記事（または slug 指定の記事）、revalidate なし
    """

    def __init__(
        self,
        client: Optional[NotionClient] = None,
        config: Optional[BlogConfig] = None,
    ) -> None:
        self.client = client or NotionClient()
        self.config = config or get_blog_config()

    def fetch_posts(self) -> List[Post]:
        """
        document フラグ付きページを作成日時の降順で取得し、Post のリストにする。

        properties を持たない結果（部分オブジェクト）は一覧から除外する。
        """
        pages = self.client.query_documents()
        posts: List[Post] = []

        for page in pages:
            if "properties" not in page:
                logger.debug("Skipped partial page object. id=%s", page.get("id"))
                continue
            posts.append(page_to_post(page))

        return posts

    def fetch_post_contents(self, post: Post) -> List[Content]:
        """
        記事ページ直下のブロックを取得し、Content の配列に変換する。
        """
        blocks = self.client.list_block_children(post.id)
        return flatten_blocks(blocks)

    def fetch_posts_with_contents(self) -> List[Post]:
        """
        全記事を取得し、各記事の本文を並列に取得して埋める。

        どれか 1 件でも失敗した場合は例外をそのまま送出する。
        """
        posts = self.fetch_posts()
        if not posts:
            return []

        with ThreadPoolExecutor(max_workers=len(posts)) as executor:
            contents_list = list(executor.map(self.fetch_post_contents, posts))

        for post, contents in zip(posts, contents_list):
            post.contents = contents

        logger.info("Fetched posts with contents. count=%d", len(posts))
        return posts

    def fetch_latest_post(self) -> Optional[Post]:
        """
        最新の document ページ 1 件を本文付きで取得する。

        - データベースが空なら None
        - properties を持たない結果なら、null フィールド・本文なしの Post
        """
        pages = self.client.query_documents()
        if not pages:
            return None

        page = pages[0]
        post = page_to_post(page)
        if "properties" not in page:
            return post

        post.contents = self.fetch_post_contents(post)
        return post

    def fetch_post_by_slug(self, slug: str) -> Optional[Post]:
        """
        slug が一致する記事を本文付きで取得する。見つからなければ None。
        """
        for post in self.fetch_posts():
            if post.slug == slug:
                post.contents = self.fetch_post_contents(post)
                return post
        return None

    def build_index_props(self) -> PostListProps:
        """一覧ページの props を構築する。"""
        return PostListProps(
            posts=self.fetch_posts_with_contents(),
            revalidate=self.config.revalidate_seconds,
        )

    def build_post_props(self, slug: Optional[str] = None) -> PostProps:
        """
        記事ページの props を構築する。slug 未指定なら最新記事を使う。
        """
        if slug is None:
            post = self.fetch_latest_post()
        else:
            post = self.fetch_post_by_slug(slug)
        return PostProps(post=post, revalidate=None)
