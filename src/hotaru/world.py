"""ワールド（フレームドライバ）"""

import logging
from collections import deque
from enum import Enum, auto
from typing import Optional

import pygame

from hotaru import config
from hotaru.entities.particle_system import ParticleSystem
from hotaru.input.controls import apply_wheel
from hotaru.input.messages import InputMessage, PointerMoved, Resized, Wheel, translate_event
from hotaru.physics.vector import Vector2
from hotaru.rendering.glow_view import GlowRenderer

logger = logging.getLogger(__name__)


class FrameState(Enum):
    IDLE = auto()
    RUNNING = auto()


class World:
    """
    登録済みパーティクルシステムを共通のフレームクロックで駆動する

    入力はメッセージとしてキューに積まれ、各ティックの先頭で
    操作可能システムへ適用される（共有ベクトルのエイリアスは持たない）。

    1ティック:
        1. 入力メッセージを適用
        2. 全システムを登録順に update
        3. 画面クリア後、全システムを登録順に draw
    """

    def __init__(self, surface: pygame.Surface, fps: int = config.FPS):
        self.surface = surface
        self.width, self.height = surface.get_size()
        self.fps = fps

        self.systems: list[ParticleSystem] = []
        self.controllable: Optional[ParticleSystem] = None
        self.pointer = Vector2(self.width / 2, self.height / 2)

        self.renderer = GlowRenderer(surface)
        self.overlay = None  # render(screen, system) を持つHUD（任意）

        self.state = FrameState.IDLE
        self.frame_count = 0
        self._messages: deque = deque()

    # --- 登録 ---

    def add_system(self, system: ParticleSystem):
        """システムを登録（controllable ならポインタに結び付ける）"""
        self.systems.append(system)

        if system.controllable:
            if self.controllable is not None and self.controllable is not system:
                logger.warning("Replacing controllable particle system; only one can follow input")
            self.controllable = system
            system.origin = self.pointer

        logger.info(
            "Registered particle system #%d (max=%s, rate=%s, controllable=%s)",
            len(self.systems), system.max_particles, system.creation_rate, system.controllable,
        )

    # --- 入力 ---

    def post(self, message: InputMessage):
        """入力メッセージをキューに積む（次のティックで適用）"""
        self._messages.append(message)

    def _dispatch_messages(self):
        while self._messages:
            message = self._messages.popleft()

            if isinstance(message, PointerMoved):
                self.pointer = Vector2(message.x, message.y)
                if self.controllable is not None:
                    self.controllable.origin = self.pointer
            elif isinstance(message, Wheel):
                if self.controllable is not None:
                    apply_wheel(self.controllable, message)
            elif isinstance(message, Resized):
                self.width, self.height = message.width, message.height
                logger.debug("Canvas resized to %dx%d", self.width, self.height)

    # --- フレーム ---

    def tick(self):
        """1フレーム分の更新と描画"""
        self._dispatch_messages()

        for system in self.systems:
            system.update(self.width, self.height)

        self.renderer.clear()
        for system in self.systems:
            system.draw(self.renderer)

        if self.overlay is not None and self.controllable is not None:
            self.overlay.render(self.surface, self.controllable)

        self.frame_count += 1

        if config.DEBUG_MODE:
            interval = max(1, int(config.DEBUG_SAMPLING_INTERVAL * self.fps))
            if self.frame_count % interval == 0:
                logger.debug(
                    "frame=%d populations=%s",
                    self.frame_count, [len(s.particles) for s in self.systems],
                )

    def start(self):
        """
        フレームループを開始（ウィンドウを閉じる / Escで終了）

        Raises:
            RuntimeError: 既に実行中の場合
        """
        if self.state == FrameState.RUNNING:
            raise RuntimeError("frame loop is already running")

        self.state = FrameState.RUNNING
        logger.info("Frame loop started (%d systems, %d fps)", len(self.systems), self.fps)

        clock = pygame.time.Clock()
        while self.state == FrameState.RUNNING:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.stop()
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self.stop()
                else:
                    message = translate_event(event)
                    if message is not None:
                        self.post(message)

            if self.state != FrameState.RUNNING:
                break

            self.tick()
            pygame.display.flip()
            clock.tick(self.fps)

        logger.info("Frame loop stopped after %d frames", self.frame_count)

    def stop(self):
        """ホスト側からループを止める"""
        self.state = FrameState.IDLE
