"""シーンプリセットとHUDのテスト"""
import pygame
pygame.init()

import pytest
from hotaru import config
from hotaru.main import build_scene, parse_args
from hotaru.physics.vector import Vector2
from hotaru.rendering.parameter_overlay import ParameterOverlayRenderer, format_parameters


def test_scene_presets_exist():
    for scene in config.Scene:
        assert scene in config.SCENE_PRESETS


def test_each_scene_has_at_most_one_controllable():
    for scene in config.Scene:
        systems = build_scene(scene, 800, 600)
        assert sum(1 for s in systems if s.controllable) <= 1


def test_classic_scene_values():
    (system,) = build_scene(config.Scene.CLASSIC, 800, 600)
    assert system.max_particles == 1000
    assert system.particle_size == 30.0
    assert system.particle_life == 200.0
    assert system.scatter_range == 3.0
    assert system.drift_rate == 0.2
    assert system.creation_rate == config.CREATION_RATE
    assert system.controllable is True


def test_twin_scene_places_ambient_emitter_by_ratio():
    ambient, bound = build_scene(config.Scene.TWIN, 800, 600)
    assert ambient.origin == Vector2(200.0, 450.0)
    assert ambient.controllable is False
    assert bound.controllable is True
    assert bound.origin == Vector2(400.0, 300.0)


def test_presets_are_not_mutated_by_build():
    before = [dict(p) for p in config.SCENE_PRESETS[config.Scene.TWIN]]
    build_scene(config.Scene.TWIN, 800, 600)
    assert config.SCENE_PRESETS[config.Scene.TWIN] == before


def test_parse_args_defaults():
    args = parse_args([])
    assert args.scene == config.DEFAULT_SCENE
    assert args.debug is False
    assert args.log_file is None


def test_parse_args_scene_is_case_insensitive():
    assert parse_args(["twin"]).scene == config.Scene.TWIN
    assert parse_args(["CLASSIC"]).scene == config.Scene.CLASSIC


def test_parse_args_debug_and_log_file():
    args = parse_args(["default", "--debug", "--log-file", "run.log"])
    assert args.scene == config.Scene.DEFAULT
    assert args.debug is True
    assert args.log_file == "run.log"


def test_parse_args_rejects_unknown_scene():
    with pytest.raises(SystemExit):
        parse_args(["nope"])


def test_format_parameters():
    (system,) = build_scene(config.Scene.DEFAULT, 800, 600)
    text = format_parameters(system)
    assert "scatter [Shift+wheel]: 1.30" in text
    assert "size [Alt+wheel]: 24.0" in text
    assert "life [wheel]: 60" in text
    assert "particles: 0" in text


def test_overlay_draws_text():
    (system,) = build_scene(config.Scene.DEFAULT, 800, 600)
    screen = pygame.Surface((800, 100))
    screen.fill((0, 0, 0))
    ParameterOverlayRenderer().render(screen, system)
    assert pygame.surfarray.array3d(screen).max() > 0


def test_overlay_uses_given_font():
    font = pygame.font.Font(None, 12)
    assert ParameterOverlayRenderer(font).font is font
    assert ParameterOverlayRenderer().font is not None
