#!/usr/bin/env python3
"""パーティクル統計ロギングスクリプト（表示なしでシミュレーションを回す）"""

import csv
import sys
import numpy as np
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from hotaru import config
from hotaru.input.controls import apply_wheel
from hotaru.input.messages import Wheel
from hotaru.main import build_scene
from hotaru.physics.vector import Vector2


def run_simulation(
    frames: int = 1200,
    output_csv: str = "particles_log.csv",
    scene: config.Scene = config.DEFAULT_SCENE,
):
    """
    シミュレーションを実行して1フレームごとの統計をCSVに記録

    ポインタは画面中央を円軌道で動かし、600フレーム目に
    ホイール操作（寿命を短縮）を1回入れる。

    Args:
        frames: シミュレーションするフレーム数
        output_csv: 出力CSVファイル名
        scene: 使用するシーン
    """
    width, height = config.SCREEN_WIDTH, config.SCREEN_HEIGHT
    systems = build_scene(scene, width, height)
    controllable = next((s for s in systems if s.controllable), None)

    csv_path = project_root / output_csv

    print(f"シミュレーション開始: {frames}フレーム ({scene.name})")
    print(f"出力先: {csv_path}")

    with open(csv_path, 'w', newline='') as csv_file:
        csv_writer = csv.writer(csv_file)
        csv_writer.writerow([
            'frame',
            'system',
            'population',
            'alive',
            'visible',
            'mean_life',
            'mean_size',
            'mean_speed',
            'particle_life',
            'particle_size',
            'scatter_range',
        ])

        for frame in range(frames):
            # ポインタ移動（円軌道）
            if controllable is not None:
                angle = frame * 0.02
                controllable.origin = Vector2(
                    width / 2 + np.cos(angle) * width * 0.25,
                    height / 2 + np.sin(angle) * height * 0.25,
                )
                if frame == frames // 2:
                    apply_wheel(controllable, Wheel(delta=10 * config.WHEEL_DELTA_PER_NOTCH))

            for index, system in enumerate(systems):
                system.update(width, height)

                particles = system.particles
                lives = np.array([p.life for p in particles]) if particles else np.zeros(1)
                sizes = np.array([p.size for p in particles]) if particles else np.zeros(1)
                speeds = (
                    np.array([np.hypot(p.velocity.x, p.velocity.y) for p in particles])
                    if particles else np.zeros(1)
                )

                csv_writer.writerow([
                    frame,
                    index,
                    len(particles),
                    sum(1 for p in particles if p.is_alive()),
                    sum(1 for p in particles if p.is_visible(width, height)),
                    f"{lives.mean():.3f}",
                    f"{sizes.mean():.3f}",
                    f"{speeds.mean():.3f}",
                    f"{system.particle_life:.1f}",
                    f"{system.particle_size:.2f}",
                    f"{system.scatter_range:.3f}",
                ])

    print("完了")
    return csv_path


if __name__ == "__main__":
    frames = int(sys.argv[1]) if len(sys.argv) > 1 else 1200
    run_simulation(frames)
