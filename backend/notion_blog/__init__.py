# backend/notion_blog/__init__.py
"""
Notion blog application package.

This package contains:
- main: FastAPI application entrypoint
- notion: Notion API client, property extractors and block flattener
- blog: post fetching, page props, HTML rendering and static build
"""
