"""ホイール入力によるライブパラメータ調整"""

import logging

from hotaru import config
from hotaru.entities.particle_system import ParticleSystem
from hotaru.input.messages import Wheel

logger = logging.getLogger(__name__)


def _adjust(value: float, delta: float, divisor: float, floor: float) -> float:
    """new = max(floor, old - delta / divisor)"""
    return max(floor, value - delta / divisor)


def adjust_scatter(system: ParticleSystem, delta: float):
    system.scatter_range = _adjust(
        system.scatter_range, delta, config.SCATTER_WHEEL_DIVISOR, config.SCATTER_FLOOR
    )


def adjust_size(system: ParticleSystem, delta: float):
    system.particle_size = _adjust(
        system.particle_size, delta, config.SIZE_WHEEL_DIVISOR, config.SIZE_FLOOR
    )


def adjust_life(system: ParticleSystem, delta: float):
    # 寿命はサイズ・不透明度計算の除数なので下限1
    system.particle_life = _adjust(
        system.particle_life, delta, config.LIFE_WHEEL_DIVISOR, config.LIFE_FLOOR
    )


def apply_wheel(system: ParticleSystem, wheel: Wheel):
    """
    修飾キーに応じて調整対象を切り替える

    - Shift: 拡散 (scatter_range)
    - Alt:   サイズ (particle_size)
    - なし:  寿命 (particle_life)
    """
    if wheel.shift:
        adjust_scatter(system, wheel.delta)
    elif wheel.alt:
        adjust_size(system, wheel.delta)
    else:
        adjust_life(system, wheel.delta)

    logger.debug(
        "wheel delta=%.1f -> scatter=%.2f size=%.2f life=%.1f",
        wheel.delta, system.scatter_range, system.particle_size, system.particle_life,
    )
