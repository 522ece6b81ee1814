"""数値積分器 (ランダムドリフト付きオイラー法)"""

from hotaru.physics.vector import Vector2, random_vector


def drift_integrate(
    position: Vector2,
    velocity: Vector2,
    drift_rate: float,
) -> tuple[Vector2, Vector2]:
    """
    1フレーム分の位置・速度を更新

    一定の重力ではなく、毎フレーム新しくサンプリングした
    擾乱を速度に加える（乱流的な揺らぎ）。時間刻みは1フレーム固定。

    手順（順序は固定）:
        1. velocity += random_vector(-drift_rate, drift_rate)
        2. position += velocity

    Args:
        position: 現在位置 [px]
        velocity: 現在速度 [px/frame]
        drift_rate: 擾乱の振幅

    Returns:
        (new_position, new_velocity)
    """
    new_velocity = velocity + random_vector(-drift_rate, drift_rate)
    new_position = position + new_velocity

    return new_position, new_velocity
