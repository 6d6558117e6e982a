# backend/notion_blog/blog/__init__.py

"""
ブログ本体（記事取得・ページ props 構築・HTML 描画・静的書き出し）。
"""
