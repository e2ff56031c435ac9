"""
どこで: `common.settings`
何を: CLI が参照する環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を避け、既定値/型の一貫性とテスト容易性を保つため。

ライブラリ本体（`randomcolor` の生成処理）は環境変数を読まない。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str

_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


@dataclass
class _Settings:
    # 生成
    SEED: int | None = None
    COUNT: int = 1
    FORMAT: str = "hex"

    # ロギング
    LOG_LEVEL: str = "warning"
    DEBUG: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `RANDOMCOLOR_SEED` は下限 0 に丸める（numpy は負のシードを受け付けない）。
    - `RANDOMCOLOR_COUNT` は下限 1 に丸める。
    - `RANDOMCOLOR_DEBUG` が真なら `LOG_LEVEL` より優先して debug とする。
    """
    _settings.SEED = env_int("RANDOMCOLOR_SEED", None, min_value=0)
    _settings.COUNT = env_int("RANDOMCOLOR_COUNT", 1, min_value=1) or 1
    _settings.FORMAT = env_str("RANDOMCOLOR_FORMAT", "hex")
    _settings.LOG_LEVEL = env_str("RANDOMCOLOR_LOG_LEVEL", "warning", choices=_LOG_LEVELS)
    _settings.DEBUG = env_bool("RANDOMCOLOR_DEBUG", False)
    if _settings.DEBUG:
        _settings.LOG_LEVEL = "debug"


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
