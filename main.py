import sys
import logging
import pygame
from config import STAGE_W, STAGE_H, FPS, FONT_NAME, YELLOW, WHITE, LOG_FORMAT
from game import (
    InputSnapshot, new_game, step, frame_delta,
    start_game, toggle_pause, reset_game,
    IDLE, PAUSED,
)
from ui import draw_state, draw_score, draw_pause_icon, draw_overlay, draw_button, draw_help, draw_hud

logger = logging.getLogger(__name__)

UP_KEYS = (pygame.K_w, pygame.K_UP)
DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)

def read_input(keys, pointer_y):
    return InputSnapshot(
        up=any(keys[k] for k in UP_KEYS),
        down=any(keys[k] for k in DOWN_KEYS),
        pointer_y=pointer_y,
    )

def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    pygame.init()
    try:
        screen = pygame.display.set_mode((STAGE_W, STAGE_H))
    except pygame.error as e:
        logger.error("Cannot open game window: %s", e)
        pygame.quit()
        return 1
    pygame.display.set_caption("Pong")

    clock = pygame.time.Clock()
    small = pygame.font.SysFont(FONT_NAME, 15)
    font = pygame.font.SysFont(FONT_NAME, 26)
    score_font = pygame.font.SysFont(FONT_NAME, 48)
    big = pygame.font.SysFont(FONT_NAME, 72)

    state = new_game()

    pause_icon = pygame.Rect(8, 2, 24, 24)
    btn_start = pygame.Rect(STAGE_W // 2 - 110, STAGE_H // 2, 220, 44)
    btn_reset = pygame.Rect(STAGE_W // 2 - 110, STAGE_H // 2 + 58, 220, 44)

    show_debug = False
    pointer_y = None

    running = True
    while running:
        dt_ms = clock.tick(FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key == pygame.K_SPACE:
                    toggle_pause(state)
                elif e.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    start_game(state)
                elif e.key == pygame.K_r:
                    reset_game(state)
                elif e.key == pygame.K_d:
                    state.bot.cycle_difficulty()
                elif e.key == pygame.K_F3:
                    show_debug = not show_debug
                elif e.key in UP_KEYS or e.key in DOWN_KEYS:
                    # keyboard takes over until the mouse moves again
                    pointer_y = None

            elif e.type == pygame.MOUSEMOTION:
                pointer_y = e.pos[1]

            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if pause_icon.collidepoint(e.pos):
                    toggle_pause(state)
                elif state.phase in (IDLE, PAUSED) and btn_start.collidepoint(e.pos):
                    start_game(state)
                elif state.phase in (IDLE, PAUSED) and btn_reset.collidepoint(e.pos):
                    reset_game(state)

        inp = read_input(pygame.key.get_pressed(), pointer_y)
        step(state, inp, frame_delta(dt_ms))

        draw_state(screen, state)
        draw_score(screen, score_font, state.score)
        draw_pause_icon(screen, pause_icon, state.phase == PAUSED)
        draw_hud(screen, small, clock.get_fps(), state, show_debug)

        if state.phase == IDLE:
            draw_overlay(screen, big, small, "PONG", "press ENTER or click START", WHITE)
            draw_button(screen, font, btn_start, "Start", active=btn_start.collidepoint(pygame.mouse.get_pos()))
            draw_button(screen, font, btn_reset, "Reset", active=btn_reset.collidepoint(pygame.mouse.get_pos()))
        elif state.phase == PAUSED:
            draw_overlay(screen, big, small, "PAUSED", "press SPACE or ENTER to resume", YELLOW)
            draw_button(screen, font, btn_start, "Resume", active=btn_start.collidepoint(pygame.mouse.get_pos()))
            draw_button(screen, font, btn_reset, "Reset", active=btn_reset.collidepoint(pygame.mouse.get_pos()))

        draw_help(screen, small)
        pygame.display.flip()

    logger.info("Final score %d - %d", state.score.player, state.score.ai)
    pygame.quit()
    return 0

if __name__ == "__main__":
    sys.exit(main())
