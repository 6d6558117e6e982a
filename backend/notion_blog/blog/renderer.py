# backend/notion_blog/blog/renderer.py

"""
Post / Content を HTML に描画するモジュール。

- Content 1 件 → HTML 断片（render_content）
- 一覧ページ / 記事ページ全体 → Jinja2 テンプレート
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .config import BlogConfig, get_blog_config
from .schemas import CodeContent, Content, PostListProps, PostProps

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_TEXT_TAGS = {
    "heading_2": ("h2", "heading2"),
    "heading_3": ("h3", "heading3"),
    "paragraph": ("p", "paragraph"),
    "quote": ("blockquote", "quote"),
}


def format_timestamp(ts: Optional[str], tz_name: str = "Asia/Tokyo") -> str:
    """
    ISO8601 文字列を指定タイムゾーンの "YYYY-MM-DD HH:mm:ss" に整形する。

    None やパースできない値は空文字にする。
    """
    if not ts:
        return ""

    try:
        dt = datetime.fromisoformat(ts.replace("Z", "+00:00"))
    except ValueError:
        return ""

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        tz = timezone.utc

    return dt.astimezone(tz).strftime(TIMESTAMP_FORMAT)


def render_content(content: Content, key: str = "") -> Markup:
    """
    Content 1 件を HTML 断片にする。テキストはエスケープされる。
    """
    text = content.text or ""

    if isinstance(content, CodeContent):
        return Markup(
            '<pre data-key="{key}" class="code lang-{language}"><code>{text}</code></pre>'
        ).format(key=key, language=content.language or "", text=text)

    tag, css_class = _TEXT_TAGS[content.type]
    return Markup('<{tag} data-key="{key}" class="{css_class}">{text}</{tag}>').format(
        tag=Markup(tag),
        key=key,
        css_class=Markup(css_class),
        text=text,
    )


class BlogRenderer:
    """
    Jinja2 テンプレートでページ全体を描画するレンダラー。
    """

    def __init__(self, config: Optional[BlogConfig] = None) -> None:
        self.config = config or get_blog_config()
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals.setdefault("blog_title", self.config.title)
        self.env.globals["render_content"] = render_content
        self.env.filters["timestamp"] = self._format_timestamp

    def _format_timestamp(self, ts: Optional[str]) -> str:
        return format_timestamp(ts, self.config.timezone)

    def render_index(self, props: PostListProps) -> str:
        """一覧ページ（全記事・本文付き）を描画する。"""
        template = self.env.get_template("index.html")
        return template.render(posts=props.posts)

    def render_post(self, props: PostProps) -> str:
        """
        記事ページを描画する。post が None の場合は本文なしのページになる。
        """
        template = self.env.get_template("post.html")
        return template.render(post=props.post)
