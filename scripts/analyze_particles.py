#!/usr/bin/env python3
"""パーティクルログ解析スクリプト（個体数と寿命の推移を可視化）"""

import sys
import pandas as pd
import matplotlib
matplotlib.use('Agg')  # GUIなしで保存
import matplotlib.pyplot as plt
from pathlib import Path


def analyze_population(csv_path: str, output_png: str = "particles_analysis.png"):
    """
    システムごとの個体数・平均寿命・平均サイズを集計して描画

    Args:
        csv_path: log_particles.py の出力CSV
        output_png: 出力画像パス
    """
    print(f"ログファイル読込: {csv_path}")
    df = pd.read_csv(csv_path)

    print(f"\n=== データサマリー ===")
    print(f"総レコード数: {len(df)}")
    print(f"フレーム数: {df['frame'].max() + 1}")

    fig, axes = plt.subplots(3, 1, figsize=(10, 9), sharex=True)

    for system_id, group in df.groupby('system'):
        peak = group['population'].max()
        steady = group['population'].iloc[len(group) // 2:].mean()
        dead_ratio = 1.0 - (group['alive'] / group['population'].clip(lower=1)).mean()

        print(f"\n--- system {system_id} ---")
        print(f"  最大個体数: {peak}")
        print(f"  後半平均個体数: {steady:.1f}")
        print(f"  寿命切れ（残留）割合: {dead_ratio * 100:.1f}%")

        axes[0].plot(group['frame'], group['population'], label=f"system {system_id}")
        axes[1].plot(group['frame'], group['mean_life'], label=f"system {system_id}")
        axes[2].plot(group['frame'], group['mean_size'], label=f"system {system_id}")

    axes[0].set_ylabel('population')
    axes[1].set_ylabel('mean life [frame]')
    axes[2].set_ylabel('mean size [px]')
    axes[2].set_xlabel('frame')
    for ax in axes:
        ax.grid(True, alpha=0.3)
        ax.legend(loc='upper right')

    fig.tight_layout()
    fig.savefig(output_png, dpi=120)
    print(f"\n図を保存: {output_png}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        default_csv = Path(__file__).parent.parent / "particles_log.csv"
        analyze_population(str(default_csv))
    else:
        analyze_population(sys.argv[1])
