# backend/notion_blog/blog/build.py

"""
ブログを静的ファイルとして書き出すビルドスクリプト。

例:
    python -m notion_blog.blog.build dist/

出力:
    dist/index.html          一覧ページ
    dist/index.json          一覧ページの props
    dist/posts/<slug>.html   記事ページ（slug が無い記事は ID を使う）
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Set

from .renderer import BlogRenderer
from .schemas import Post, PostProps
from .service import BlogService

logger = logging.getLogger(__name__)

_SAFE_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def post_filename(post: Post, used: Optional[Set[str]] = None) -> str:
    """
    記事ページのファイル名を決める。ファイル名に使えない slug は ID で代用する。

    used に含まれる名前（同じ slug の記事が既に書き出し済み）の場合は
    "<slug>-<id>.html" に切り替える。
    """
    used = used if used is not None else set()

    if post.slug and _SAFE_NAME.match(post.slug):
        name = f"{post.slug}.html"
        if name not in used:
            return name
        fallback = f"{post.slug}-{post.id}.html"
        logger.warning(
            "Duplicate slug; writing post under a different name. slug=%s id=%s file=%s",
            post.slug,
            post.id,
            fallback,
        )
        name = fallback
    else:
        name = f"{post.id}.html"

    base, count = name[: -len(".html")], 1
    while name in used:
        count += 1
        name = f"{base}-{count}.html"
    return name


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def build_site(
    output_dir: str,
    *,
    service: Optional[BlogService] = None,
    renderer: Optional[BlogRenderer] = None,
) -> List[Path]:
    """
    全ページを output_dir 以下に書き出し、書き出したファイルのパスを返す。

    Notion API の失敗はそのまま送出する（途中までのファイルは残る）。
    """
    service = service or BlogService()
    renderer = renderer or BlogRenderer(service.config)
    out = Path(output_dir)

    props = service.build_index_props()
    written: List[Path] = [
        _write(out / "index.html", renderer.render_index(props)),
        _write(out / "index.json", props.model_dump_json(by_alias=True, indent=2)),
    ]

    used: Set[str] = set()
    for post in props.posts:
        name = post_filename(post, used)
        used.add(name)
        html = renderer.render_post(PostProps(post=post))
        written.append(_write(out / "posts" / name, html))

    logger.info("Built static site. output_dir=%s posts=%d", out, len(props.posts))
    return written


def main() -> None:
    """
    簡易 CLI エントリーポイント。
    """
    import argparse

    parser = argparse.ArgumentParser(description="Build the blog as static files")
    parser.add_argument("output_dir", help="出力先ディレクトリ")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="DEBUG ログを出力する",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    build_site(args.output_dir)


if __name__ == "__main__":
    main()
