"""
どこで: `common` パッケージ。
何を: randomcolor の CLI が使う軽量ユーティリティ（環境変数、設定、ロギング）。
なぜ: ライブラリ本体を環境依存から切り離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging
from .settings import get as get_settings

__all__ = [
    "setup_default_logging",
    "get_settings",
]
