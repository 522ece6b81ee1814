"""2次元ベクトル（不変値型）"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """
    2次元の点・ベクトル

    演算はすべて新しいVector2を返す。パーティクル同士で
    速度や位置を共有しても互いに書き換わらない。
    """

    x: float = 0.0
    y: float = 0.0

    def add(self, other: "Vector2") -> "Vector2":
        """成分ごとの和"""
        return Vector2(self.x + other.x, self.y + other.y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def clone(self) -> "Vector2":
        return Vector2(self.x, self.y)


def random_vector(low: float, high: float) -> Vector2:
    """
    x, y を独立に一様分布 U(low, high) からサンプリング

    low > high も許容する（範囲が反転するだけ）。

    Args:
        low: 下限
        high: 上限

    Returns:
        ランダムなVector2
    """
    x, y = np.random.uniform(low, high, size=2)
    return Vector2(float(x), float(y))
