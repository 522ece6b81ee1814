"""Pygameイベント → 入力メッセージ変換のテスト"""
import pygame
pygame.init()

from hotaru import config
from hotaru.input.messages import PointerMoved, Resized, Wheel, translate_event


def test_mouse_motion_becomes_pointer_moved():
    event = pygame.event.Event(pygame.MOUSEMOTION, {'pos': (120, 45), 'rel': (1, 1), 'buttons': (0, 0, 0)})
    assert translate_event(event) == PointerMoved(120.0, 45.0)


def test_wheel_up_is_positive_delta():
    event = pygame.event.Event(pygame.MOUSEWHEEL, {'x': 0, 'y': 1})
    assert translate_event(event, mods=0) == Wheel(config.WHEEL_DELTA_PER_NOTCH, False, False)


def test_wheel_down_is_negative_delta():
    event = pygame.event.Event(pygame.MOUSEWHEEL, {'x': 0, 'y': -2})
    message = translate_event(event, mods=0)
    assert message.delta == -2 * config.WHEEL_DELTA_PER_NOTCH


def test_wheel_reads_modifiers():
    event = pygame.event.Event(pygame.MOUSEWHEEL, {'x': 0, 'y': 1})
    assert translate_event(event, mods=pygame.KMOD_LSHIFT).shift is True
    assert translate_event(event, mods=pygame.KMOD_LALT).alt is True

    plain = translate_event(event, mods=0)
    assert plain.shift is False and plain.alt is False


def test_video_resize_becomes_resized():
    event = pygame.event.Event(pygame.VIDEORESIZE, {'size': (1024, 768), 'w': 1024, 'h': 768})
    assert translate_event(event) == Resized(1024, 768)


def test_unrelated_event_is_ignored():
    event = pygame.event.Event(pygame.KEYDOWN, {'key': pygame.K_a})
    assert translate_event(event) is None
