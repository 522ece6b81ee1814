"""Hotaru: マウスで操る発光パーティクルの雲"""

__version__ = "0.1.0"
