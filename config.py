import math

STAGE_W, STAGE_H = 800, 500
FPS = 60

BG = (14, 16, 22)
WHITE = (230, 230, 230)
BALL_COLOR = (255, 255, 255)
NET = (44, 46, 54)
GRAY = (130, 130, 130)
YELLOW = (245, 220, 80)
HUD_BAR = (20, 22, 28)

FONT_NAME = "consolas"

PADDLE_W = 12
PADDLE_H = 90
PADDLE_MARGIN = 20
PADDLE_SPEED = 6.0

BALL_R = 8
BALL_SPEED_BASE = 4.0
BALL_SPEED_INC = 0.2
MAX_BALL_SPEED = 12.0

MAX_BOUNCE_ANGLE = math.pi / 3
SERVE_ANGLE = math.pi / 8

# delta = 1.0 means one 60 Hz frame
FRAME_MS = 16.666
MAX_FRAME_MS = 40.0

NET_STEP = 18

AI_TUNING = {
    "easy":   {"max_speed": 3.2, "gain": 0.08},
    "normal": {"max_speed": 4.5, "gain": 0.12},
    "hard":   {"max_speed": 6.0, "gain": 0.18},
}
AI_DIFFICULTY = "normal"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
