"""発光パーティクル"""

from dataclasses import dataclass

from hotaru import config
from hotaru.physics.vector import Vector2


@dataclass
class Particle:
    """
    単一のパーティクル

    所有するParticleSystemのupdate()だけが値を書き換える。
    """

    position: Vector2
    velocity: Vector2
    life: float          # 残り寿命（フレーム）
    initial_life: float  # 放出時の寿命
    size: float          # 描画半径 (px)

    def is_alive(self) -> bool:
        """生存判定（寿命0のフレームまでは生存）"""
        return self.life >= 0

    def is_visible(self, width: float, height: float,
                   margin: float = config.VISIBILITY_MARGIN) -> bool:
        """画面を余白分広げた矩形の内側にあるか"""
        return (
            -margin < self.position.x < width + margin
            and -margin < self.position.y < height + margin
        )
