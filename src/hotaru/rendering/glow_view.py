"""グロー（発光円）レンダラー"""

import numpy as np
import pygame

from hotaru import config
from hotaru.physics.vector import Vector2


def build_glow_array(radius: int, color_stops=config.GLOW_COLOR_STOPS) -> np.ndarray:
    """
    放射グラデーションの輝度配列を生成

    中心からの距離 r/radius に対してカラーストップを線形補間する。
    加算合成で使うため、白 × アルファ（乗算済み）の輝度で表す。

    Args:
        radius: 半径 (px)
        color_stops: (offset 0-1, alpha 0-1) の並び

    Returns:
        (2*radius, 2*radius, 3) の uint8 配列
    """
    size = radius * 2
    coords = np.arange(size) + 0.5 - radius
    xx, yy = np.meshgrid(coords, coords, indexing='ij')
    distance = np.hypot(xx, yy) / radius

    offsets = [offset for offset, _ in color_stops]
    alphas = [alpha for _, alpha in color_stops]
    alpha = np.interp(distance, offsets, alphas, right=0.0)

    intensity = np.round(alpha * 255).astype(np.uint8)
    return np.repeat(intensity[:, :, np.newaxis], 3, axis=2)


FULL_SHADE = 255 >> config.OPACITY_SHADE_SHIFT


def opacity_shade(opacity: float) -> int:
    """不透明度 (0-1) を量子化した段階 (0 - FULL_SHADE)"""
    level = int(255 * min(1.0, max(0.0, opacity)))
    return level >> config.OPACITY_SHADE_SHIFT


def shade_level(shade: int) -> int:
    """段階を乗算用の輝度 (0-255) に戻す（FULL_SHADE は 255）"""
    low_bits = (1 << config.OPACITY_SHADE_SHIFT) - 1
    return (shade << config.OPACITY_SHADE_SHIFT) | low_bits


class GlowRenderer:
    """
    発光パーティクルのレンダラー

    グラデーション原画を1回だけ作り、直径と不透明度の段階ごとに
    縮小・減光したものをキャッシュして加算合成 (lighter) でブリットする。
    毎フレームのコピーや塗りはキャッシュミス時だけ発生する。
    """

    def __init__(self, surface: pygame.Surface, base_radius: int = config.GLOW_SPRITE_RADIUS):
        self.surface = surface
        self.base_radius = base_radius

        self._base_sprite = pygame.Surface((base_radius * 2, base_radius * 2))
        pygame.surfarray.blit_array(self._base_sprite, build_glow_array(base_radius))

        # (直径, 不透明度の段階) -> スプライト
        self._sprite_cache: dict[tuple[int, int], pygame.Surface] = {}

    def clear(self, color=config.COLOR_BACKGROUND):
        """描画面を塗りつぶす"""
        self.surface.fill(color)

    def draw_glow(self, position: Vector2, radius: float, opacity: float):
        """
        発光円を1つ描画

        Args:
            position: 中心 (px)
            radius: 半径 (px)
            opacity: 不透明度 (0-1)
        """
        diameter = int(round(radius * 2))
        if diameter < 1 or opacity <= 0:
            return

        sprite = self._sprite_for(diameter, opacity_shade(opacity))

        top_left = (
            int(round(position.x - diameter / 2)),
            int(round(position.y - diameter / 2)),
        )
        self.surface.blit(sprite, top_left, special_flags=pygame.BLEND_RGB_ADD)

    def _sprite_for(self, diameter: int, shade: int = FULL_SHADE) -> pygame.Surface:
        """キャッシュ済みのスプライト、なければ縮小・減光して作る"""
        key = (diameter, shade)
        sprite = self._sprite_cache.get(key)
        if sprite is not None:
            return sprite

        if shade == FULL_SHADE:
            sprite = pygame.transform.smoothscale(self._base_sprite, (diameter, diameter))
        else:
            sprite = self._sprite_for(diameter, FULL_SHADE).copy()
            level = shade_level(shade)
            sprite.fill((level, level, level), special_flags=pygame.BLEND_RGB_MULT)

        if len(self._sprite_cache) >= config.SPRITE_CACHE_SIZE:
            self._sprite_cache.clear()
        self._sprite_cache[key] = sprite
        return sprite
