# backend/notion_blog/blog/schemas.py

"""
ブログ記事を内部で扱うためのスキーマ定義。

- Content: ブロック 1 件分を平坦化したレコード（type をタグにした union）
- Post: 記事 1 件（メタ情報 + Content の配列）
- PostListProps / PostProps: 一覧ページ・記事ページに渡すページ props
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

TextContentType = Literal["paragraph", "quote", "heading_2", "heading_3"]


class TextContent(BaseModel):
    """段落・引用・見出しなど、テキストのみを持つ Content。"""

    type: TextContentType = Field(..., description="ブロック種別")
    text: Optional[str] = Field(None, description="先頭 rich_text のプレーンテキスト")


class CodeContent(BaseModel):
    """コードブロック。言語タグをそのまま保持する。"""

    type: Literal["code"] = Field("code", description="ブロック種別（固定値 code）")
    text: Optional[str] = Field(None, description="先頭 rich_text のプレーンテキスト")
    language: Optional[str] = Field(None, description="Notion 上のコード言語タグ")


Content = Annotated[Union[TextContent, CodeContent], Field(discriminator="type")]


class Post(BaseModel):
    """
    Notion の 1 ページを表現する記事モデル。

    タイムスタンプは Notion が返す ISO8601 文字列をそのまま保持し、
    表示用の整形は renderer 側で行う。
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Notion ページ ID")
    title: Optional[str] = Field(None, description="Name（title プロパティ）")
    slug: Optional[str] = Field(None, description="Slug（rich_text プロパティ）")
    created_ts: Optional[str] = Field(
        None,
        alias="createdTs",
        description="ページ作成日時（created_time）",
    )
    last_edited_ts: Optional[str] = Field(
        None,
        alias="lastEditedTs",
        description="ページ更新日時（last_edited_time）",
    )
    contents: List[Content] = Field(
        default_factory=list,
        description="ブロック順に並んだ Content の配列",
    )


class PostListProps(BaseModel):
    """
    一覧ページの props。

    revalidate 秒ごとに再生成される。
    """

    posts: List[Post]
    revalidate: Optional[int] = Field(
        None,
        description="再生成までの秒数。None の場合は再生成しない。",
    )


class PostProps(BaseModel):
    """
    記事ページの props。

    記事ページは一度生成したら再生成しない。
    """

    post: Optional[Post] = None
    revalidate: Optional[int] = None
