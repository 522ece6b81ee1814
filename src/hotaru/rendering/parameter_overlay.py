"""ライブパラメータ表示（HUD）"""

from typing import Optional

import pygame

from hotaru import config
from hotaru.entities.particle_system import ParticleSystem


def format_parameters(system: ParticleSystem) -> str:
    """操作可能システムの現在値を1行の文字列にする"""
    return (
        f"scatter [Shift+wheel]: {system.scatter_range:.2f}   "
        f"size [Alt+wheel]: {system.particle_size:.1f}   "
        f"life [wheel]: {system.particle_life:.0f}   "
        f"particles: {len(system.particles)}"
    )


class ParameterOverlayRenderer:
    """画面左上にライブパラメータを表示"""

    def __init__(self, font: Optional[pygame.font.Font] = None):
        self.font = font or pygame.font.Font(None, config.OVERLAY_FONT_SIZE)

    def render(self, screen: pygame.Surface, system: ParticleSystem):
        text = self.font.render(format_parameters(system), True, config.COLOR_OVERLAY_TEXT)
        screen.blit(text, (12, 10))
