"""
randomcolor 向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- ライブラリはハンドラを設定しない。最小構成の適用は CLI のみが行う。
- ホスト側が既にロギングを構成済みでも、`randomcolor` ロガーのレベルだけは反映する。
"""

from __future__ import annotations

import logging

LIBRARY_LOGGER = "randomcolor"


def resolve_level(level: int | str, default: int = logging.WARNING) -> int:
    """レベル名（大小文字不問）または数値を logging の数値レベルへ変換する。"""
    if isinstance(level, str):
        lvl = logging.getLevelName(level.strip().upper())
        return lvl if isinstance(lvl, int) else default
    return int(level)


def setup_default_logging(level: int | str = "WARNING") -> bool:
    """最小限のロギング設定を 1 度だけ適用する。

    - `randomcolor` ロガーには常に `level` を設定する
    - ルートロガーにハンドラが既にあればそれ以上何もしない（False を返す）
    - ハンドラが無ければ `basicConfig` を適用し True を返す
    """
    lvl = resolve_level(level)
    logging.getLogger(LIBRARY_LOGGER).setLevel(lvl)

    root = logging.getLogger()
    if root.handlers:
        return False
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return True


__all__ = ["LIBRARY_LOGGER", "resolve_level", "setup_default_logging"]
