import logging
from dataclasses import dataclass, field
from typing import Optional
from config import STAGE_W, MAX_FRAME_MS, FRAME_MS
from ai import BotAI
from core import (
    Ball, Paddle, left_paddle, right_paddle, paddle_home_y,
    move_paddle, follow_pointer, serve_ball, integrate_ball,
    resolve_wall_collision, resolve_paddle_collision,
)

logger = logging.getLogger(__name__)

IDLE = "IDLE"
RUNNING = "RUNNING"
PAUSED = "PAUSED"

@dataclass(frozen=True)
class InputSnapshot:
    up: bool = False
    down: bool = False
    pointer_y: Optional[float] = None

    @property
    def direction(self):
        # down wins when both are held
        if self.down:
            return 1
        if self.up:
            return -1
        return 0

@dataclass
class Score:
    player: int = 0
    ai: int = 0

    def reset(self):
        self.player = 0
        self.ai = 0

@dataclass
class GameState:
    player: Paddle = field(default_factory=left_paddle)
    opponent: Paddle = field(default_factory=right_paddle)
    ball: Ball = field(default_factory=Ball)
    score: Score = field(default_factory=Score)
    bot: BotAI = field(default_factory=BotAI)
    phase: str = IDLE

def new_game(difficulty=None):
    state = GameState()
    if difficulty is not None:
        state.bot.set_difficulty(difficulty)
    serve_ball(state.ball)
    return state

def frame_delta(dt_ms):
    """Convert milliseconds since the last frame into 60 Hz frame units.

    Long gaps (window dragged, process stopped) are capped at MAX_FRAME_MS.
    """
    return max(0.0, min(float(dt_ms), MAX_FRAME_MS)) / FRAME_MS

def center_paddles(state: GameState):
    state.player.pos.y = paddle_home_y(state.player.h)
    state.opponent.pos.y = paddle_home_y(state.opponent.h)

def check_scoring(state: GameState):
    ball = state.ball
    if ball.pos.x - ball.r < 0:
        state.score.ai += 1
        logger.info("AI scores: %d - %d", state.score.player, state.score.ai)
        serve_ball(ball, 1)
        return "AI"
    if ball.pos.x + ball.r > STAGE_W:
        state.score.player += 1
        logger.info("Player scores: %d - %d", state.score.player, state.score.ai)
        serve_ball(ball, -1)
        return "PLAYER"
    return None

def step(state: GameState, inp: InputSnapshot, delta: float):
    if state.phase != RUNNING:
        return None

    if inp.direction:
        move_paddle(state.player, inp.direction, delta)
    elif inp.pointer_y is not None:
        follow_pointer(state.player, inp.pointer_y)

    state.bot.update(delta, state.opponent, state.ball)

    prev_x = state.ball.pos.x
    integrate_ball(state.ball, delta)
    resolve_wall_collision(state.ball)
    resolve_paddle_collision(state.ball, state.player, 1, prev_x)
    resolve_paddle_collision(state.ball, state.opponent, -1, prev_x)

    return check_scoring(state)

def start_game(state: GameState):
    if state.phase == PAUSED:
        state.phase = RUNNING
        logger.info("Game resumed")
        return
    if state.phase == RUNNING:
        return
    center_paddles(state)
    state.score.reset()
    serve_ball(state.ball)
    state.phase = RUNNING
    logger.info("Game started (AI: %s)", state.bot.difficulty)

def toggle_pause(state: GameState):
    if state.phase == RUNNING:
        state.phase = PAUSED
        logger.info("Game paused")
    elif state.phase == PAUSED:
        state.phase = RUNNING
        logger.info("Game resumed")

def reset_game(state: GameState):
    state.phase = IDLE
    state.score.reset()
    center_paddles(state)
    serve_ball(state.ball)
    logger.info("Game reset")
