import logging
from config import AI_TUNING, AI_DIFFICULTY
from core import Ball, Paddle, clamp, keep_paddle_on_field

logger = logging.getLogger(__name__)

def track_opponent(paddle: Paddle, ball: Ball, delta: float, max_speed: float, gain: float):
    # proportional follow of the ball's y, capped per frame
    diff = ball.pos.y - paddle.center_y
    dy = clamp(diff * gain, -max_speed, max_speed)
    paddle.pos.y += dy * delta
    keep_paddle_on_field(paddle)
    return dy

class BotAI:
    def __init__(self, difficulty=AI_DIFFICULTY):
        self.set_difficulty(difficulty)

    def set_difficulty(self, difficulty):
        if difficulty not in AI_TUNING:
            raise ValueError(f"unknown difficulty {difficulty!r}, expected one of {sorted(AI_TUNING)}")
        self.difficulty = difficulty
        cfg = AI_TUNING[difficulty]
        self.max_speed = cfg["max_speed"]
        self.gain = cfg["gain"]

    def cycle_difficulty(self):
        names = list(AI_TUNING)
        nxt = names[(names.index(self.difficulty) + 1) % len(names)]
        self.set_difficulty(nxt)
        logger.info("AI difficulty set to %s", nxt)
        return nxt

    def update(self, delta, paddle: Paddle, ball: Ball):
        return track_opponent(paddle, ball, delta, self.max_speed, self.gain)
