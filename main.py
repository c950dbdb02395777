import logging
import os
import sys

import pygame

from duelpong.config import CFG, audio_muted, log_level
from duelpong.controls import Action, apply_action
from duelpong.game_state import GameEvent, GamePhase, GameState, Side, Snapshot

logger = logging.getLogger(__name__)

# --- Audio: safe pre-init and loader ---
SFX = {}


def load_sfx(name, path):
    if not os.path.exists(path):
        logger.warning("sound %r not found at %s, playing without it", name, path)
        return
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        SFX[name] = pygame.mixer.Sound(path)
    except pygame.error as e:
        # audio is optional, the game runs silent
        logger.warning("could not load sound %r: %s", name, e)


def load_sounds():
    if audio_muted():
        logger.info("audio muted by PONG_MUTE")
        return
    load_sfx("ping", "assets/sfx/ping.ogg")
    load_sfx("wall", "assets/sfx/wall.ogg")
    load_sfx("score", "assets/sfx/score.ogg")
    load_sfx("select", "assets/sfx/select.ogg")


def play(name):
    if name in SFX:
        SFX[name].play()


# game event -> sound cue
EVENT_SFX = {
    GameEvent.PADDLE_HIT: "ping",
    GameEvent.WALL_BOUNCE: "wall",
    GameEvent.POINT_LEFT: "score",
    GameEvent.POINT_RIGHT: "score",
}

# --- Config ---
WIDTH, HEIGHT = CFG.screen_width, CFG.screen_height
FPS = 120
TITLE = "Duel Pong"
FONT_NAME = "PressStart2P,monospace"
FONT_SIZE = 32

# palette
BACKGROUND = (20, 20, 30)
CENTER_LINE = (80, 80, 90)
LEFT_COLOR = (100, 200, 255)
RIGHT_COLOR = (255, 100, 100)
BALL_COLOR = (255, 255, 100)
TEXT = (200, 200, 200)
DIM_TEXT = (150, 150, 150)
START_GREEN = (100, 255, 100)

KEY_ACTIONS = {
    pygame.K_SPACE: Action.PRIMARY,
    pygame.K_ESCAPE: Action.CANCEL,
}


def handle_keydown(state: GameState, key: int) -> bool:
    """Returns False when the key asks to quit."""
    action = KEY_ACTIONS.get(key)
    if action is None:
        return True
    if action is Action.PRIMARY and state.phase == GamePhase.MENU:
        play("select")
    return apply_action(state, action)


def move_paddles(state: GameState, keys, dt: float):
    # W/S for player 1, arrows for player 2
    if keys[pygame.K_w]:
        state.paddle_left.move_up(dt)
    if keys[pygame.K_s]:
        state.paddle_left.move_down(dt, state.screen_height)
    if keys[pygame.K_UP]:
        state.paddle_right.move_up(dt)
    if keys[pygame.K_DOWN]:
        state.paddle_right.move_down(dt, state.screen_height)


# --- Drawing ---
def draw_text(surf, font, text, center_x, top, color):
    img = font.render(text, True, color)
    surf.blit(img, (center_x - img.get_width() // 2, top))


def draw_center_line(surf):
    # dashed center line, 80s style
    dash_h, gap, dash_w = 15, 10, 3
    x = surf.get_width() // 2 - dash_w // 2
    for y in range(0, surf.get_height(), dash_h + gap):
        pygame.draw.rect(surf, CENTER_LINE, (x, y, dash_w, dash_h))


def draw_field(surf, snap: Snapshot):
    surf.fill(BACKGROUND)
    draw_center_line(surf)
    pygame.draw.rect(surf, LEFT_COLOR, snap.paddle_left)
    pygame.draw.rect(surf, RIGHT_COLOR, snap.paddle_right)
    pygame.draw.rect(surf, BALL_COLOR, snap.ball)


def draw_score(surf, font, snap: Snapshot):
    w = surf.get_width()
    draw_text(surf, font, str(snap.score_left), w // 4, 30, LEFT_COLOR)
    draw_text(surf, font, str(snap.score_right), 3 * w // 4, 30, RIGHT_COLOR)


def draw_menu(surf, font, snap: Snapshot):
    surf.fill(BACKGROUND)
    cx = surf.get_width() // 2
    draw_text(surf, font, "DUEL PONG", cx, 100, LEFT_COLOR)
    draw_text(surf, font, "PLAYER 1: W / S", cx, 250, TEXT)
    draw_text(surf, font, "PLAYER 2: ARROWS", cx, 300, TEXT)
    draw_text(surf, font, f"FIRST TO {snap.max_score} POINTS WINS", cx, 370, BALL_COLOR)
    draw_text(surf, font, "PRESS SPACE TO START", cx, 450, START_GREEN)
    draw_text(surf, font, "ESC TO QUIT", cx, 500, DIM_TEXT)


def draw_pause(surf, font):
    cx, cy = surf.get_width() // 2, surf.get_height() // 2
    draw_text(surf, font, "PAUSED", cx, cy - 20, BALL_COLOR)
    draw_text(surf, font, "SPACE TO RESUME", cx, cy + 30, TEXT)


def draw_game_over(surf, font, snap: Snapshot):
    cx, cy = surf.get_width() // 2, surf.get_height() // 2
    if snap.winner == Side.LEFT:
        banner, color = "PLAYER 1 WINS!", LEFT_COLOR
    else:
        banner, color = "PLAYER 2 WINS!", RIGHT_COLOR
    draw_text(surf, font, banner, cx, cy - 40, color)
    draw_text(surf, font, "SPACE FOR NEW GAME", cx, cy + 20, TEXT)
    draw_text(surf, font, "ESC FOR MENU", cx, cy + 60, DIM_TEXT)


def render(surf, font, snap: Snapshot):
    if snap.phase == GamePhase.MENU:
        draw_menu(surf, font, snap)
        return

    draw_field(surf, snap)
    draw_score(surf, font, snap)
    if snap.phase == GamePhase.PAUSED:
        draw_pause(surf, font)
    elif snap.phase == GamePhase.GAME_OVER:
        draw_game_over(surf, font, snap)


def main():
    logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.mixer.pre_init(frequency=44100, size=-16, channels=2, buffer=1024)
    try:
        pygame.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
    except pygame.error:
        logger.exception("could not start the display")
        pygame.quit()
        sys.exit(1)

    load_sounds()
    clock = pygame.time.Clock()
    state = GameState.from_config(CFG)
    logger.info("%s started at %dx%d", TITLE, WIDTH, HEIGHT)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if not handle_keydown(state, event.key):
                    running = False

        move_paddles(state, pygame.key.get_pressed(), dt)

        for ev in state.update(dt):
            if ev in EVENT_SFX:
                play(EVENT_SFX[ev])

        render(screen, font, state.snapshot())
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
