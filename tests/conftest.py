"""共通フィクスチャ。

- 乱数シード固定
- 既定ランダムソースの隔離
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from randomcolor import rng as rng_mod
from randomcolor.rng import RandomSource


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def rng() -> RandomSource:
    return RandomSource(12345)


@pytest.fixture()
def fresh_default_source(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """テスト間で既定ランダムソースを共有しない。"""
    monkeypatch.setattr(rng_mod, "_DEFAULT", None)
    yield
