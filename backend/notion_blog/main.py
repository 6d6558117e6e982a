# backend/notion_blog/main.py

"""
ブログアプリケーションのエントリーポイント。

    uvicorn notion_blog.main:app

- 一覧ページ・記事ページを HTML で公開する
- 同じ内容のページ props を JSON で公開する
"""

from fastapi import FastAPI

from notion_blog.blog.router import router as blog_router


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションを組み立てる。

    - ブログページ (/, /latest, /posts/{slug})
    - ページ props API (/api/posts, /api/posts/latest)
    - 死活確認 (/health)
    """
    app = FastAPI(title="Notion Blog")
    app.include_router(blog_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """死活確認用。Notion API には触れない。"""
        return {"status": "ok"}

    return app


app = create_app()
