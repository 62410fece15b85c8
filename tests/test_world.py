import logging

import pytest

import floodit.game as game_module
from floodit.components.effect_mask import EffectMask
from floodit.components.field import Field
from floodit.components.game_status import GameStatus
from floodit.components.game_tag import FloodGame
from floodit.components.paint_animation import PaintAnimation, PaintPhase
from floodit.components.sound_queue import SoundQueue
from floodit.constants import ALLOWED_STEP_COUNT, COLOR_COUNT, FIELD_H, FIELD_W, NO_COLOR
from floodit.game import GameState, timestamp_seed
from floodit.systems.field_ops import get_game_entity
from floodit.world import create_world
from esper import World


def test_create_world_registers_single_game_entity():
    world = create_world(5)
    entities = [entity for entity, _ in world.get_component(FloodGame)]
    assert len(entities) == 1
    entity = entities[0]
    for component_type in (Field, EffectMask, PaintAnimation, GameStatus, SoundQueue):
        assert world.has_component(entity, component_type)


def test_initial_state_is_controllable_and_not_terminal():
    game = GameState(12345)
    assert game.width == FIELD_W
    assert game.height == FIELD_H
    assert game.phase is PaintPhase.CONTROLLABLE
    assert game.painted_count == 0
    assert game.moves_remaining == ALLOWED_STEP_COUNT
    assert not game.is_clear
    assert not game.is_over
    assert game.hover_color == NO_COLOR
    assert game.frame == -1
    assert game.requested_sounds == []
    assert all(not flag for row in game.effect_mask for flag in row)


def test_random_field_is_seeded_and_in_range():
    first = GameState(1706226338)
    second = GameState(1706226338)
    assert first.seed == 1706226338
    assert first.cells == second.cells
    assert all(0 <= cell < COLOR_COUNT for row in first.cells for cell in row)


def test_different_seeds_give_different_fields():
    assert GameState(1).cells != GameState(2).cells


def test_seed_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="floodit.world")
    GameState(424242)
    assert "random seed = 424242" in caplog.text


def test_new_seeds_from_the_clock(monkeypatch):
    monkeypatch.setattr(game_module, "timestamp_seed", lambda: 1700000000)
    game = GameState.new()
    assert game.seed == 1700000000
    assert game.cells == GameState(1700000000).cells


def test_new_accepts_explicit_seed():
    assert GameState.new(99).seed == 99


def test_timestamp_seed_is_whole_seconds(monkeypatch):
    monkeypatch.setattr(game_module.time, "time", lambda: 1706226338.75)
    assert timestamp_seed() == 1706226338


def test_injected_cells_define_field_shape():
    game = GameState(1, cells=[[0, 1, 2], [3, 4, 5]])
    assert game.width == 3
    assert game.height == 2
    assert game.color_at(1, 2) == 5
    assert len(game.effect_mask) == 2 and len(game.effect_mask[0]) == 3


def test_injected_cells_are_validated():
    with pytest.raises(ValueError):
        GameState(1, cells=[[0, 9]])


def test_queries_return_copies():
    game = GameState(1, cells=[[0, 1], [0, 2]])
    cells = game.cells
    cells[0][0] = 5
    assert game.color_at(0, 0) == 0


def test_world_without_game_entity_is_an_error():
    with pytest.raises(RuntimeError):
        get_game_entity(World())
