from collections import defaultdict

import pygame
import pytest

import main
from duelpong.game_state import GamePhase


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 32)
    pygame.font.quit()


@pytest.fixture
def surf():
    return pygame.Surface((main.WIDTH, main.HEIGHT))


def pixel(surf, pos):
    return tuple(surf.get_at(pos))[:3]


def pressed(*keys):
    state = defaultdict(bool)
    for k in keys:
        state[k] = True
    return state


def test_space_starts_and_escape_quits_from_menu(state):
    assert main.handle_keydown(state, pygame.K_SPACE)
    assert state.phase == GamePhase.PLAYING
    assert main.handle_keydown(state, pygame.K_ESCAPE)
    assert state.phase == GamePhase.MENU
    assert main.handle_keydown(state, pygame.K_ESCAPE) is False


def test_other_keys_are_ignored(state):
    assert main.handle_keydown(state, pygame.K_a)
    assert state.phase == GamePhase.MENU


def test_move_paddles(state):
    main.move_paddles(state, pressed(pygame.K_w, pygame.K_DOWN), 0.1)
    assert state.paddle_left.y == pytest.approx(220.0)
    assert state.paddle_right.y == pytest.approx(300.0)


def test_move_paddles_clamped(state):
    main.move_paddles(state, pressed(pygame.K_s, pygame.K_UP), 10.0)
    assert state.paddle_left.y == 600.0 - 80.0
    assert state.paddle_right.y == 0.0


def test_play_without_loaded_sounds_is_silent():
    main.play("does-not-exist")


def test_load_sfx_missing_file(tmp_path):
    main.load_sfx("ghost", str(tmp_path / "ghost.ogg"))
    assert "ghost" not in main.SFX


def test_render_menu(surf, font, state):
    main.render(surf, font, state.snapshot())
    assert pixel(surf, (5, 5)) == main.BACKGROUND


def test_render_playing_draws_field(surf, font, playing):
    main.render(surf, font, playing.snapshot())
    assert pixel(surf, (400, 300)) == main.BALL_COLOR
    assert pixel(surf, (37, 300)) == main.LEFT_COLOR
    assert pixel(surf, (762, 300)) == main.RIGHT_COLOR
    assert pixel(surf, (400, 587)) == main.CENTER_LINE


def band(surf, top=260, bottom=400):
    return pygame.image.tostring(surf.subsurface((0, top, surf.get_width(), bottom - top)), "RGB")


@pytest.mark.parametrize("phase", [GamePhase.PAUSED, GamePhase.GAME_OVER])
def test_render_overlays_draw_over_field(font, playing, phase):
    plain = pygame.Surface((main.WIDTH, main.HEIGHT))
    main.render(plain, font, playing.snapshot())

    playing.score_right = 5 if phase == GamePhase.GAME_OVER else 0
    playing.phase = phase
    overlay = pygame.Surface((main.WIDTH, main.HEIGHT))
    main.render(overlay, font, playing.snapshot())

    assert pixel(overlay, (37, 300)) == main.LEFT_COLOR
    assert band(overlay) != band(plain)


@pytest.fixture
def texts(monkeypatch):
    drawn = []
    monkeypatch.setattr(main, "draw_text", lambda surf, font, text, x, top, color: drawn.append((text, color)))
    return drawn


def test_game_over_names_left_winner(surf, font, playing, texts):
    playing.score_left = 5
    playing.phase = GamePhase.GAME_OVER
    main.draw_game_over(surf, font, playing.snapshot())
    assert texts[0] == ("PLAYER 1 WINS!", main.LEFT_COLOR)


def test_game_over_names_right_winner(surf, font, playing, texts):
    playing.score_right = 5
    playing.phase = GamePhase.GAME_OVER
    main.draw_game_over(surf, font, playing.snapshot())
    assert texts[0] == ("PLAYER 2 WINS!", main.RIGHT_COLOR)


def test_pause_overlay_text(surf, font, texts):
    main.draw_pause(surf, font)
    assert [t for t, _ in texts] == ["PAUSED", "SPACE TO RESUME"]
