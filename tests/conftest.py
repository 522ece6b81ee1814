"""テスト共通設定（ディスプレイなし環境でpygameを使う）"""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
