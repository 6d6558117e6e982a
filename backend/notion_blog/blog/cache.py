# backend/notion_blog/blog/cache.py

"""
ページ props の再生成（revalidate）を管理するシンプルなキャッシュ。

- 初回 get() で loader を呼び出して値を保持する
- revalidate 秒を過ぎた後の get() で loader を呼び直す
- revalidate=None の場合は一度生成した値を使い続ける
- 再生成に失敗した場合は直前の値を返す
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RevalidatingCache(Generic[T]):
    """
    loader の結果を revalidate 秒だけ使い回すキャッシュ。

    再生成で loader が例外を投げた場合は、ログを残して直前の値を返し続ける。
    一度も生成できていない場合だけ例外をそのまま送出する。
    """

    def __init__(
        self,
        loader: Callable[[], T],
        revalidate: Optional[int] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._loader = loader
        self._revalidate = revalidate
        self._clock = clock
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._generated_at: Optional[float] = None

    @property
    def revalidate(self) -> Optional[int]:
        return self._revalidate

    def _is_fresh(self, now: float) -> bool:
        if self._generated_at is None:
            return False
        if self._revalidate is None:
            return True
        return now - self._generated_at < self._revalidate

    def get(self) -> T:
        """
        キャッシュ済みの値を返す。期限切れまたは未生成なら loader で作り直す。
        """
        with self._lock:
            now = self._clock()
            if self._is_fresh(now):
                return self._value  # type: ignore[return-value]

            try:
                value = self._loader()
            except Exception:  # noqa: BLE001
                if self._generated_at is None:
                    raise
                # 次回の get() で再度 loader を試す（_generated_at は更新しない）
                logger.exception(
                    "Failed to regenerate page props; serving previous value. revalidate=%s",
                    self._revalidate,
                )
                return self._value  # type: ignore[return-value]

            self._value = value
            self._generated_at = now
            logger.debug("Regenerated cached page props. revalidate=%s", self._revalidate)
            return value

    def clear(self) -> None:
        """
        キャッシュを破棄する。次回 get() で必ず再生成される。
        """
        with self._lock:
            self._value = None
            self._generated_at = None
