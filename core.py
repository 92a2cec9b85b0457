import math
import random
import logging
from dataclasses import dataclass, field
from config import (
    STAGE_W, STAGE_H, PADDLE_W, PADDLE_H, PADDLE_MARGIN, PADDLE_SPEED,
    BALL_R, BALL_SPEED_BASE, BALL_SPEED_INC, MAX_BALL_SPEED,
    MAX_BOUNCE_ANGLE, SERVE_ANGLE,
)

logger = logging.getLogger(__name__)

class Vec2:
    __slots__ = ("x", "y")
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __mul__(self, k): return Vec2(self.x * k, self.y * k)
    def __repr__(self): return f"Vec2({self.x:.3f}, {self.y:.3f})"
    def length(self): return math.hypot(self.x, self.y)

@dataclass
class Paddle:
    pos: Vec2
    w: float = PADDLE_W
    h: float = PADDLE_H
    speed: float = PADDLE_SPEED

    @property
    def center_y(self):
        return self.pos.y + self.h / 2

    def rect(self):
        return (self.pos.x, self.pos.y, self.w, self.h)

@dataclass
class Ball:
    pos: Vec2 = field(default_factory=lambda: Vec2(STAGE_W / 2, STAGE_H / 2))
    r: float = BALL_R
    vel: Vec2 = field(default_factory=Vec2)
    speed: float = BALL_SPEED_BASE

def clamp(v, a, b):
    return max(a, min(b, v))

def paddle_home_y(h=PADDLE_H):
    return (STAGE_H - h) / 2

def left_paddle():
    return Paddle(Vec2(PADDLE_MARGIN, paddle_home_y()))

def right_paddle():
    return Paddle(Vec2(STAGE_W - PADDLE_MARGIN - PADDLE_W, paddle_home_y()))

def keep_paddle_on_field(p: Paddle):
    p.pos.y = clamp(p.pos.y, 0.0, STAGE_H - p.h)

def move_paddle(p: Paddle, direction: float, delta: float):
    p.pos.y += direction * p.speed * delta
    keep_paddle_on_field(p)

def follow_pointer(p: Paddle, pointer_y: float):
    p.pos.y = pointer_y - p.h / 2
    keep_paddle_on_field(p)

def serve_ball(ball: Ball, direction=None):
    """Put the ball back in the centre and launch it.

    The launch angle is uniform in +-SERVE_ANGLE. When ``direction`` is not
    given the ball goes left or right with equal chance.
    """
    ball.pos = Vec2(STAGE_W / 2, STAGE_H / 2)
    ball.speed = BALL_SPEED_BASE
    angle = random.uniform(-SERVE_ANGLE, SERVE_ANGLE)
    if direction is None:
        direction = random.choice((-1, 1))
    ball.vel = Vec2(math.cos(angle) * ball.speed * direction,
                    math.sin(angle) * ball.speed)

def integrate_ball(ball: Ball, delta: float):
    ball.pos = ball.pos + ball.vel * delta

def resolve_wall_collision(ball: Ball):
    if ball.pos.y - ball.r < 0:
        ball.pos.y = ball.r
        ball.vel.y = -ball.vel.y
        return True
    if ball.pos.y + ball.r > STAGE_H:
        ball.pos.y = STAGE_H - ball.r
        ball.vel.y = -ball.vel.y
        return True
    return False

def rect_intersect(ax, ay, aw, ah, bx, by, bw, bh):
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by

def ball_hits_paddle(ball: Ball, p: Paddle, prev_x=None):
    # box swept along x from prev_x, so a fast ball cannot skip the paddle
    if prev_x is None:
        prev_x = ball.pos.x
    lo, hi = sorted((prev_x, ball.pos.x))
    d = ball.r * 2
    return rect_intersect(lo - ball.r, ball.pos.y - ball.r, hi - lo + d, d, *p.rect())

def bounce_angle(ball: Ball, p: Paddle):
    offset = (ball.pos.y - p.center_y) / (p.h / 2)
    return clamp(offset, -1.0, 1.0) * MAX_BOUNCE_ANGLE

def resolve_paddle_collision(ball: Ball, p: Paddle, outward: int, prev_x=None):
    """Deflect the ball off ``p`` towards ``outward`` (+1 right, -1 left).

    The exit angle depends only on where the ball struck the paddle: the
    centre sends it straight back, the ends send it off at MAX_BOUNCE_ANGLE.
    Every hit adds BALL_SPEED_INC up to MAX_BALL_SPEED. ``prev_x`` is the
    ball centre before this frame's move; without it only the current
    position is tested.
    """
    if not ball_hits_paddle(ball, p, prev_x):
        return False

    # move out first so the next frame cannot hit again
    if outward > 0:
        ball.pos.x = p.pos.x + p.w + ball.r
    else:
        ball.pos.x = p.pos.x - ball.r

    angle = bounce_angle(ball, p)
    ball.speed = min(MAX_BALL_SPEED, ball.speed + BALL_SPEED_INC)
    ball.vel = Vec2(math.cos(angle) * ball.speed * outward,
                    math.sin(angle) * ball.speed)
    logger.debug("paddle hit angle=%.1f speed=%.2f", math.degrees(angle), ball.speed)
    return True
