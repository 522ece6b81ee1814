"""Hotaru メインエントリーポイント"""

import argparse
import logging
from typing import Optional

import pygame

from hotaru import config
from hotaru.entities.particle_system import ParticleSystem, ParticleSystemConfig, create_particle_system
from hotaru.logging_config import setup_logging
from hotaru.physics.vector import Vector2
from hotaru.rendering.parameter_overlay import ParameterOverlayRenderer
from hotaru.world import World

logger = logging.getLogger(__name__)


def build_scene(scene: config.Scene, width: float, height: float) -> list[ParticleSystem]:
    """
    シーンのプリセットからパーティクルシステム群を生成

    origin_ratio（画面比）はピクセル座標に換算する。
    """
    systems = []
    for preset in config.SCENE_PRESETS[scene]:
        preset = dict(preset)
        ratio = preset.pop('origin_ratio', None)
        if ratio is not None:
            preset['origin'] = Vector2(ratio[0] * width, ratio[1] * height)
        systems.append(create_particle_system(ParticleSystemConfig(**preset), width, height))
    return systems


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """コマンドライン引数（シーン名は大文字小文字不問）"""
    parser = argparse.ArgumentParser(
        prog="hotaru",
        description="Interactive glowing particle cloud (wheel: life, Shift+wheel: scatter, Alt+wheel: size)",
    )
    parser.add_argument(
        'scene',
        nargs='?',
        type=str.lower,
        default=config.DEFAULT_SCENE.name.lower(),
        choices=[s.name.lower() for s in config.Scene],
        help='Scene preset to start with',
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log population statistics every DEBUG_SAMPLING_INTERVAL seconds',
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write the log to this file (debug records go only here)',
    )
    args = parser.parse_args(argv)
    args.scene = config.Scene[args.scene.upper()]
    return args


def main(argv: Optional[list[str]] = None):
    """メインループ"""
    args = parse_args(argv)
    if args.debug:
        config.DEBUG_MODE = True
    setup_logging(log_file=args.log_file)

    pygame.init()
    screen = pygame.display.set_mode(
        (config.SCREEN_WIDTH, config.SCREEN_HEIGHT), pygame.RESIZABLE
    )
    pygame.display.set_caption(config.WINDOW_TITLE)

    world = World(screen)
    for system in build_scene(args.scene, world.width, world.height):
        world.add_system(system)
    world.overlay = ParameterOverlayRenderer()

    logger.info("Scene: %s", args.scene.name)
    try:
        world.start()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
