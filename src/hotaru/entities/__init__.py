"""エンティティ モジュール"""

from .particle import Particle
from .particle_system import ParticleSystem, ParticleSystemConfig, create_particle_system

__all__ = [
    "Particle",
    "ParticleSystem",
    "ParticleSystemConfig",
    "create_particle_system",
]
