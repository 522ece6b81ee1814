"""入力メッセージ（Pygameイベント → ワールドへのメッセージ）"""

from dataclasses import dataclass
from typing import Optional, Union

import pygame

from hotaru import config


@dataclass(frozen=True)
class PointerMoved:
    """ポインタ移動（画面座標 px）"""
    x: float
    y: float


@dataclass(frozen=True)
class Wheel:
    """
    ホイール操作

    delta は上方向スクロールで正（1ノッチ = WHEEL_DELTA_PER_NOTCH）。
    """
    delta: float
    shift: bool = False  # 拡散(scatter)調整
    alt: bool = False    # サイズ調整


@dataclass(frozen=True)
class Resized:
    """ウィンドウサイズ変更"""
    width: int
    height: int


InputMessage = Union[PointerMoved, Wheel, Resized]


def translate_event(event: pygame.event.Event, mods: Optional[int] = None) -> Optional[InputMessage]:
    """
    Pygameイベントを入力メッセージに変換

    Args:
        event: Pygameイベント
        mods: 修飾キーのビットマスク（None なら pygame.key.get_mods()）

    Returns:
        対応するメッセージ、対象外のイベントなら None
    """
    if event.type == pygame.MOUSEMOTION:
        x, y = event.pos
        return PointerMoved(float(x), float(y))

    if event.type == pygame.MOUSEWHEEL:
        if mods is None:
            mods = pygame.key.get_mods()
        return Wheel(
            delta=event.y * config.WHEEL_DELTA_PER_NOTCH,
            shift=bool(mods & pygame.KMOD_SHIFT),
            alt=bool(mods & pygame.KMOD_ALT),
        )

    if event.type == pygame.VIDEORESIZE:
        width, height = event.size
        return Resized(int(width), int(height))

    return None
