"""物理エンジン モジュール"""

from .vector import Vector2, random_vector
from .integrator import drift_integrate

__all__ = [
    "Vector2",
    "random_vector",
    "drift_integrate",
]
