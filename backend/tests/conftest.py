# backend/tests/conftest.py
"""
Pytest configuration for notion-blog backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import notion_blog.*` works correctly in tests.
- Ensures required environment variables for tests are set
  with safe dummy values (e.g., NOTION_TOKEN, NOTION_DATABASE_ID).
- Resets cached config and shared page state between tests.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set dummy environment variables required for tests.

    These values are only for local testing and do NOT contain real secrets.
    In real environments, proper values should be provided via .env or system env.
    """
    os.environ.setdefault("NOTION_TOKEN", "dummy-notion-token-for-tests")
    os.environ.setdefault("NOTION_DATABASE_ID", "dummy-notion-db-id-for-tests")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


@pytest.fixture(autouse=True)
def _reset_cached_state():
    from notion_blog.blog.config import get_blog_config
    from notion_blog.blog.state import reset_state
    from notion_blog.notion.config import get_notion_config

    get_notion_config.cache_clear()
    get_blog_config.cache_clear()
    reset_state()
    yield
    get_notion_config.cache_clear()
    get_blog_config.cache_clear()
    reset_state()
