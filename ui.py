import pygame
from config import STAGE_W, STAGE_H, BG, WHITE, BALL_COLOR, NET, GRAY, YELLOW, HUD_BAR, NET_STEP, PADDLE_W

def draw_playfield(surf):
    surf.fill(BG)
    pygame.draw.rect(surf, HUD_BAR, (0, 0, STAGE_W, 28))
    x = STAGE_W // 2
    for y in range(10, STAGE_H, NET_STEP):
        pygame.draw.line(surf, NET, (x, y), (x, y + NET_STEP // 2), 2)

def draw_paddle(surf, paddle):
    pygame.draw.rect(surf, WHITE, pygame.Rect(*(int(round(v)) for v in paddle.rect())))

def draw_ball(surf, ball):
    pygame.draw.circle(surf, BALL_COLOR, (int(ball.pos.x), int(ball.pos.y)), int(ball.r))

def draw_state(surf, state):
    draw_playfield(surf)
    draw_paddle(surf, state.player)
    draw_paddle(surf, state.opponent)
    draw_ball(surf, state.ball)

def draw_score(surf, font, score):
    left = font.render(f"{score.player}", True, WHITE)
    right = font.render(f"{score.ai}", True, WHITE)
    surf.blit(left, left.get_rect(center=(STAGE_W // 2 - 60, 56)))
    surf.blit(right, right.get_rect(center=(STAGE_W // 2 + 60, 56)))

def draw_pause_icon(screen, rect, paused):
    # flat glyph in the score bar: two paddles while running, play arrow while paused
    pygame.draw.rect(screen, HUD_BAR, rect)
    x, y, w, h = rect
    if paused:
        pygame.draw.polygon(screen, YELLOW, [(x + 7, y + 5), (x + 7, y + h - 5), (x + w - 5, y + h // 2)])
    else:
        bar = pygame.Rect(0, 0, PADDLE_W // 3, h - 10)
        for cx in (x + w // 3, x + w - w // 3):
            bar.center = (cx, y + h // 2)
            pygame.draw.rect(screen, WHITE, bar)

def draw_overlay(screen, big, small, msg, hint="", color=YELLOW):
    veil = pygame.Surface((STAGE_W, STAGE_H - 28), pygame.SRCALPHA)
    veil.fill((*BG, 190))
    screen.blit(veil, (0, 28))
    t = big.render(msg, True, color)
    r = t.get_rect(center=(STAGE_W // 2, STAGE_H // 3))
    screen.blit(t, r)
    # net-style underline
    for x in range(r.left, r.right, NET_STEP):
        pygame.draw.line(screen, NET, (x, r.bottom + 6), (x + NET_STEP // 2, r.bottom + 6), 2)
    if hint:
        h = small.render(hint, True, GRAY)
        screen.blit(h, h.get_rect(center=(STAGE_W // 2, r.bottom + 26)))

def draw_button(screen, font, rect, text, active=False):
    pygame.draw.rect(screen, HUD_BAR, rect)
    pygame.draw.rect(screen, WHITE if active else NET, rect, 2)
    if active:
        # paddle marker on the hovered button
        pygame.draw.rect(screen, WHITE, (rect.x + 8, rect.y + 8, PADDLE_W // 2, rect.h - 16))
    surf = font.render(text.upper(), True, WHITE if active else GRAY)
    screen.blit(surf, surf.get_rect(center=rect.center))

HELP_TEXT = ("W/S UP/DOWN mouse: move  ENTER: start  SPACE: pause  R: reset  "
             "D: level  F3: debug  ESC: quit")

def draw_help(screen, small):
    t = small.render(HELP_TEXT, True, GRAY)
    screen.blit(t, t.get_rect(center=(STAGE_W // 2, STAGE_H - 16)))

def draw_hud(screen, small, fps, state, show_debug):
    if not show_debug:
        return
    ball = state.ball
    lines = [
        (f"FPS: {fps:5.1f}   ai:{state.bot.difficulty}   {state.phase}", GRAY),
        (f"BALL  x={ball.pos.x:7.1f} y={ball.pos.y:7.1f}", WHITE),
        (f"      vx={ball.vel.x:6.2f} vy={ball.vel.y:6.2f} speed={ball.speed:5.2f}", WHITE),
        (f"PLYR  y={state.player.pos.y:7.1f}   AI y={state.opponent.pos.y:7.1f}", WHITE),
    ]
    y = 36
    for text, col in lines:
        surf = small.render(text, True, col)
        screen.blit(surf, (56, y))
        y += 18
