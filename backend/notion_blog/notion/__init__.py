# backend/notion_blog/notion/__init__.py

"""
Notion 連携用モジュール群。

主な責務:
- Notion API からデータベース・ブロックを読み取る
- ページのプロパティからタイトル / スラッグを取り出す
- ブロック一覧を内部の Content レコードへ平坦化する
"""
