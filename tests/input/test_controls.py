"""ホイールによるライブパラメータ調整のテスト"""

import pytest
from hotaru.entities.particle_system import ParticleSystem
from hotaru.input.controls import adjust_life, adjust_scatter, adjust_size, apply_wheel
from hotaru.input.messages import Wheel
from hotaru.physics.vector import Vector2


def _system(**kwargs) -> ParticleSystem:
    return ParticleSystem(Vector2(0.0, 0.0), controllable=True, **kwargs)


def test_wheel_without_modifier_adjusts_life():
    """修飾なし delta=100 で寿命 60 → 50"""
    system = _system(particle_life=60.0)
    apply_wheel(system, Wheel(delta=100))
    assert system.particle_life == pytest.approx(50.0)


def test_life_is_floored_at_one():
    """delta=1000 でも寿命は負にならず 1 で止まる"""
    system = _system(particle_life=60.0)
    apply_wheel(system, Wheel(delta=1000))
    assert system.particle_life == 1.0


def test_negative_delta_increases_life():
    system = _system(particle_life=60.0)
    apply_wheel(system, Wheel(delta=-120))
    assert system.particle_life == pytest.approx(72.0)


def test_shift_adjusts_scatter_only():
    system = _system(scatter_range=3.0, particle_size=30.0, particle_life=200.0)
    apply_wheel(system, Wheel(delta=120, shift=True))
    assert system.scatter_range == pytest.approx(1.8)
    assert system.particle_size == 30.0
    assert system.particle_life == 200.0


def test_alt_adjusts_size_only():
    system = _system(scatter_range=3.0, particle_size=30.0, particle_life=200.0)
    apply_wheel(system, Wheel(delta=-240, alt=True))
    assert system.particle_size == pytest.approx(32.4)
    assert system.scatter_range == 3.0
    assert system.particle_life == 200.0


def test_shift_takes_precedence_over_alt():
    system = _system(scatter_range=3.0, particle_size=30.0)
    apply_wheel(system, Wheel(delta=100, shift=True, alt=True))
    assert system.scatter_range == pytest.approx(2.0)
    assert system.particle_size == 30.0


@pytest.mark.parametrize("adjust, attr", [(adjust_scatter, "scatter_range"), (adjust_size, "particle_size")])
def test_scatter_and_size_floor_at_zero(adjust, attr):
    system = _system()
    adjust(system, 10_000)
    assert getattr(system, attr) == 0.0


def test_life_sensitivity_is_ten_times_size():
    """同じデルタで寿命はサイズの10倍変化する"""
    system = _system(particle_life=100.0, particle_size=100.0)
    adjust_life(system, 50)
    adjust_size(system, 50)
    assert 100.0 - system.particle_life == pytest.approx(10 * (100.0 - system.particle_size))
