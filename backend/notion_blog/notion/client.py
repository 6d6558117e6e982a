# backend/notion_blog/notion/client.py

"""
Notion API との通信を担当するクライアントモジュール。
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import NotionConfig, get_notion_config

logger = logging.getLogger(__name__)

# ブログ記事として公開するページを示すチェックボックスプロパティ
DOCUMENT_PROPERTY = "document"


class NotionClientError(RuntimeError):
    """Notion クライアント全般の例外。"""


class NotionAuthError(NotionClientError):
    """認証・権限関連のエラー。"""


class NotionAPIError(NotionClientError):
    """その他 Notion API 呼び出し時のエラー。"""


class NotionClient:
    """
    Notion API の薄いラッパークライアント。

    - データベースの query（ページネーション込み）
    - ブロックの子要素一覧（ページネーション込み）
    """

    def __init__(
        self,
        config: Optional[NotionConfig] = None,
        timeout: float = 10.0,
    ) -> None:
        self.config = config or get_notion_config()
        self._timeout = timeout

    def _build_headers(self) -> Dict[str, str]:
        """
        Notion API 呼び出しに必要なヘッダーを構築。
        """
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Notion-Version": self.config.api_version,
            "Content-Type": "application/json",
        }

    def _raise_for_status(self, response: httpx.Response) -> None:
        """
        HTTP レスポンスコードに応じて適切な例外を投げる。
        """
        if response.status_code == 401:
            raise NotionAuthError("Unauthorized. Check NOTION_TOKEN.")
        if response.status_code == 403:
            raise NotionAuthError("Forbidden. Check Notion integration permissions.")
        if response.status_code >= 400:
            raise NotionAPIError(
                f"Notion API error: {response.status_code} {response.text}"
            )

    def _parse_list_response(self, response: httpx.Response) -> Dict[str, Any]:
        """
        list 形式のレスポンス（results / has_more / next_cursor）を検証して返す。
        """
        self._raise_for_status(response)

        try:
            data = response.json()
        except ValueError as exc:
            raise NotionAPIError("Unexpected Notion API response: body is not JSON.") from exc

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise NotionAPIError("Unexpected Notion API response format: 'results' is not a list.")

        return data

    def query_database(
        self,
        filter: Optional[Dict[str, Any]] = None,
        sorts: Optional[List[Dict[str, Any]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        データベースを query し、全ページ分の結果を連結して返す。

        返り値は Notion API の生のページオブジェクトのリスト。
        上位レイヤー（blog.service）で Post に変換する。
        """
        url = f"{self.config.api_base_url}/databases/{self.config.database_id}/query"

        payload: Dict[str, Any] = {"page_size": self.config.page_size}
        if filter is not None:
            payload["filter"] = filter
        if sorts is not None:
            payload["sorts"] = sorts

        results: List[Dict[str, Any]] = []
        cursor: Optional[str] = None

        while True:
            body = dict(payload)
            if cursor:
                body["start_cursor"] = cursor

            try:
                response = httpx.post(
                    url,
                    headers=self._build_headers(),
                    json=body,
                    timeout=self._timeout,
                )
            except httpx.RequestError as exc:
                raise NotionClientError(f"Failed to call Notion API: {exc}") from exc

            data = self._parse_list_response(response)
            results.extend(data["results"])

            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                break

        logger.debug(
            "Queried Notion database. database_id=%s count=%d",
            self.config.database_id,
            len(results),
        )
        return results

    def query_documents(self) -> List[Dict[str, Any]]:
        """
        document チェックボックスが ON のページを作成日時の降順で取得する。
        """
        return self.query_database(
            filter={
                "and": [
                    {
                        "property": DOCUMENT_PROPERTY,
                        "checkbox": {"equals": True},
                    }
                ]
            },
            sorts=[
                {
                    "timestamp": "created_time",
                    "direction": "descending",
                }
            ],
        )

    def list_block_children(self, block_id: str) -> List[Dict[str, Any]]:
        """
        ページ（ブロック）直下の子ブロックを全件取得する。

        ネストした子ブロック（has_children）は辿らない。
        """
        url = f"{self.config.api_base_url}/blocks/{block_id}/children"

        results: List[Dict[str, Any]] = []
        cursor: Optional[str] = None

        while True:
            params: Dict[str, Any] = {"page_size": self.config.page_size}
            if cursor:
                params["start_cursor"] = cursor

            try:
                response = httpx.get(
                    url,
                    headers=self._build_headers(),
                    params=params,
                    timeout=self._timeout,
                )
            except httpx.RequestError as exc:
                raise NotionClientError(
                    f"Failed to list Notion block children: {exc}"
                ) from exc

            data = self._parse_list_response(response)
            results.extend(data["results"])

            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                break

        logger.debug("Listed Notion block children. block_id=%s count=%d", block_id, len(results))
        return results
