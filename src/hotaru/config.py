"""Hotaru 設定・定数"""

from enum import Enum, auto

# 画面設定
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "Hotaru: Interactive Particle Cloud"

# パーティクルシステム既定値
MAX_PARTICLES = 300
PARTICLE_LIFE = 60.0      # フレーム数
PARTICLE_SIZE = 24.0      # px (半径)
CREATION_RATE = 3         # 1フレームあたりの放出数
SCATTER_RANGE = 1.3       # px/frame (初速のばらつき)
DRIFT_RATE = 0.5          # px/frame² (毎フレームのランダム擾乱)

# 寿命の減り方（1フレームにつき1ずつ減算）
LIFE_DECREMENT = 1.0

# カリング: 画面外余白 (px)
VISIBILITY_MARGIN = 100.0

# ホイール入力 → パラメータ調整
# 調整式: new = max(floor, old - delta / divisor)
SCATTER_WHEEL_DIVISOR = 100.0
SIZE_WHEEL_DIVISOR = 100.0
LIFE_WHEEL_DIVISOR = 10.0      # 寿命は他の10倍の感度
SCATTER_FLOOR = 0.0
SIZE_FLOOR = 0.0
LIFE_FLOOR = 1.0               # 寿命は除数なのでゼロにしない
WHEEL_DELTA_PER_NOTCH = 120.0  # ホイール1ノッチあたりのデルタ（ブラウザのwheelDelta相当）

# グロー描画
GLOW_SPRITE_RADIUS = 64        # px (グラデーション原画の半径)
GLOW_COLOR_STOPS = (
    (0.0, 0.8),   # 中心: 不透明寄りの白
    (0.3, 0.5),   # 半透明の白
    (1.0, 0.0),   # 縁: 完全透明
)
SPRITE_CACHE_SIZE = 4096       # (直径, 段階) ごとのスプライト保持上限
OPACITY_SHADE_SHIFT = 2        # 不透明度の量子化（255 >> 2 = 64段階）

# カラー定義
COLOR_BACKGROUND = (0, 0, 0)
COLOR_OVERLAY_TEXT = (180, 180, 180)
OVERLAY_FONT_SIZE = 20

# デバッグ出力
DEBUG_MODE = False
DEBUG_SAMPLING_INTERVAL = 1.0  # 秒 (個体数ログの間隔)


class Scene(Enum):
    """起動シーン"""
    DEFAULT = auto()   # 既定値のみの操作可能システム1つ
    CLASSIC = auto()   # 大きく長寿命の雲（1000個）
    TWIN = auto()      # 操作可能システム + 独立した環境エミッタ


# シーンごとのシステム設定（ParticleSystemConfigのキーワード引数）
# origin は画面比 (0-1) で指定し、起動時にピクセルへ換算する
SCENE_PRESETS = {
    Scene.DEFAULT: [
        {'controllable': True},
    ],
    Scene.CLASSIC: [
        {
            'max_particles': 1000,
            'particle_size': 30.0,
            'particle_life': 200.0,
            'scatter_range': 3.0,
            'drift_rate': 0.2,
            'controllable': True,
        },
    ],
    Scene.TWIN: [
        {
            'origin_ratio': (0.25, 0.75),
            'max_particles': 200,
            'particle_size': 16.0,
            'particle_life': 90.0,
            'creation_rate': 2,
            'scatter_range': 0.6,
            'drift_rate': 0.15,
        },
        {
            'max_particles': 1000,
            'particle_size': 30.0,
            'particle_life': 200.0,
            'scatter_range': 3.0,
            'drift_rate': 0.2,
            'controllable': True,
        },
    ],
}

DEFAULT_SCENE = Scene.CLASSIC
