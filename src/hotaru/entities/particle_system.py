"""パーティクルシステム（放出・積分・カリング・描画）"""

import logging
from dataclasses import dataclass
from typing import Optional

from hotaru import config
from hotaru.entities.particle import Particle
from hotaru.physics.integrator import drift_integrate
from hotaru.physics.vector import Vector2, random_vector

logger = logging.getLogger(__name__)


@dataclass
class ParticleSystemConfig:
    """システム生成時の設定（すべて省略可能）"""

    origin: Optional[Vector2] = None  # None なら画面中央
    max_particles: int = config.MAX_PARTICLES
    particle_life: float = config.PARTICLE_LIFE
    particle_size: float = config.PARTICLE_SIZE
    creation_rate: int = config.CREATION_RATE
    scatter_range: float = config.SCATTER_RANGE
    drift_rate: float = config.DRIFT_RATE
    controllable: bool = False


class ParticleSystem:
    """
    パーティクルの放出源と、その個体群の所有者

    - 毎フレーム creation_rate 個を放出（上限 max_particles）
    - ランダムドリフトで速度・位置を積分
    - 「画面外 かつ 寿命切れ」の個体を除去
    - 加算合成で描画

    particle_size / particle_life は実行中に書き換えてよい。
    既存パーティクルのサイズと不透明度も次のフレームから追従する。
    """

    def __init__(
        self,
        origin: Vector2,
        max_particles: int = config.MAX_PARTICLES,
        particle_life: float = config.PARTICLE_LIFE,
        particle_size: float = config.PARTICLE_SIZE,
        creation_rate: int = config.CREATION_RATE,
        scatter_range: float = config.SCATTER_RANGE,
        drift_rate: float = config.DRIFT_RATE,
        controllable: bool = False,
    ):
        self.particles: list[Particle] = []

        self.origin = origin
        self.max_particles = max_particles
        self.particle_life = particle_life
        self.particle_size = particle_size
        self.creation_rate = creation_rate
        self.scatter_range = scatter_range
        self.drift_rate = drift_rate
        self.controllable = controllable

    def update(self, width: float, height: float):
        """
        1フレーム進める

        順序: 既存個体の積分 → カリング → 新規放出

        Args:
            width: 現在の画面幅
            height: 現在の画面高さ
        """
        for particle in self.particles:
            self._integrate(particle)

        self.particles = [
            p for p in self.particles
            if not self._should_remove(p, width, height)
        ]

        self.emit()

    def emit(self):
        """
        上限未満なら creation_rate 個をまとめて放出

        上限チェックはバッチの前に1回だけ行うため、
        最大 creation_rate - 1 個まで上限を超えることがある。
        """
        if len(self.particles) >= self.max_particles:
            return

        # 位置は値として取り込む（放出後はポインタに追従しない）
        origin = self.origin.clone()
        for _ in range(self.creation_rate):
            self.particles.append(Particle(
                position=origin,
                velocity=random_vector(-self.scatter_range, self.scatter_range),
                life=self.particle_life,
                initial_life=self.particle_life,
                size=self.particle_size,
            ))

    def draw(self, renderer):
        """
        全個体を描画

        Args:
            renderer: draw_glow(position, radius, opacity) を持つ描画先
        """
        for particle in self.particles:
            renderer.draw_glow(
                particle.position,
                particle.size,
                self.opacity_of(particle),
            )

    def opacity_of(self, particle: Particle) -> float:
        """現在の particle_life に対する残り寿命の割合 (0-1)"""
        return min(1.0, max(0.0, self._life_ratio(particle.life)))

    def _integrate(self, particle: Particle):
        particle.position, particle.velocity = drift_integrate(
            particle.position, particle.velocity, self.drift_rate
        )
        particle.life -= config.LIFE_DECREMENT
        # 個体の保持値ではなくシステムの現在値から再計算
        particle.size = max(0.0, self.particle_size * self._life_ratio(particle.life))

    def _life_ratio(self, life: float) -> float:
        # particle_life <= 0 は縮退設定: 見えないシステムとして扱う
        if self.particle_life <= 0:
            return 0.0
        return life / self.particle_life

    def _should_remove(self, particle: Particle, width: float, height: float) -> bool:
        # 画面外に出ただけでは消さない（ドリフトで戻ってくることがある）
        return not particle.is_visible(width, height) and not particle.is_alive()


def create_particle_system(
    system_config: Optional[ParticleSystemConfig] = None,
    width: float = config.SCREEN_WIDTH,
    height: float = config.SCREEN_HEIGHT,
) -> ParticleSystem:
    """
    設定からパーティクルシステムを生成

    Args:
        system_config: 設定（None なら既定値）
        width: 画面幅（origin 省略時の中央計算用）
        height: 画面高さ

    Returns:
        未登録のParticleSystem
    """
    cfg = system_config or ParticleSystemConfig()
    origin = cfg.origin if cfg.origin is not None else Vector2(width / 2, height / 2)

    if cfg.max_particles <= 0 or cfg.creation_rate <= 0:
        logger.warning(
            "Degenerate particle system: max_particles=%s creation_rate=%s (no particles will be emitted)",
            cfg.max_particles, cfg.creation_rate,
        )

    return ParticleSystem(
        origin=origin,
        max_particles=cfg.max_particles,
        particle_life=cfg.particle_life,
        particle_size=cfg.particle_size,
        creation_rate=cfg.creation_rate,
        scatter_range=cfg.scatter_range,
        drift_rate=cfg.drift_rate,
        controllable=cfg.controllable,
    )
