import math
import unittest
from unittest import mock

from config import (
    STAGE_W, STAGE_H, BALL_SPEED_BASE, BALL_SPEED_INC, MAX_BALL_SPEED,
    MAX_BOUNCE_ANGLE, MAX_FRAME_MS,
)
from core import Vec2, serve_ball, paddle_home_y
from game import (
    InputSnapshot, new_game, step, check_scoring, frame_delta,
    start_game, toggle_pause, reset_game,
    IDLE, RUNNING, PAUSED,
)


class TestInputSnapshot(unittest.TestCase):
    def test_direction(self):
        self.assertEqual(InputSnapshot().direction, 0)
        self.assertEqual(InputSnapshot(up=True).direction, -1)
        self.assertEqual(InputSnapshot(down=True).direction, 1)
        self.assertEqual(InputSnapshot(up=True, down=True).direction, 1)


class TestFrameDelta(unittest.TestCase):
    def test_one_frame(self):
        self.assertAlmostEqual(frame_delta(16.666), 1.0)

    def test_long_gap_is_capped(self):
        self.assertEqual(frame_delta(5000), frame_delta(MAX_FRAME_MS))

    def test_negative_is_zero(self):
        self.assertEqual(frame_delta(-3), 0.0)


class TestPhases(unittest.TestCase):
    def test_new_game_is_idle(self):
        state = new_game()
        self.assertEqual(state.phase, IDLE)
        self.assertAlmostEqual(state.ball.vel.length(), BALL_SPEED_BASE)

    def test_idle_does_not_step(self):
        state = new_game()
        pos = (state.ball.pos.x, state.ball.pos.y)
        self.assertIsNone(step(state, InputSnapshot(down=True), 1.0))
        self.assertEqual((state.ball.pos.x, state.ball.pos.y), pos)
        self.assertEqual(state.player.pos.y, paddle_home_y())

    def test_start_pause_resume(self):
        state = new_game()
        toggle_pause(state)
        self.assertEqual(state.phase, IDLE)
        start_game(state)
        self.assertEqual(state.phase, RUNNING)
        toggle_pause(state)
        self.assertEqual(state.phase, PAUSED)
        pos = (state.ball.pos.x, state.ball.pos.y)
        step(state, InputSnapshot(), 1.0)
        self.assertEqual((state.ball.pos.x, state.ball.pos.y), pos)
        toggle_pause(state)
        self.assertEqual(state.phase, RUNNING)
        toggle_pause(state)
        start_game(state)
        self.assertEqual(state.phase, RUNNING)

    def test_start_while_running_keeps_score(self):
        state = new_game()
        start_game(state)
        state.score.player = 3
        start_game(state)
        self.assertEqual(state.score.player, 3)

    def test_reset(self):
        state = new_game()
        start_game(state)
        state.score.player, state.score.ai = 4, 2
        state.player.pos.y = 0
        toggle_pause(state)
        reset_game(state)
        self.assertEqual(state.phase, IDLE)
        self.assertEqual((state.score.player, state.score.ai), (0, 0))
        self.assertEqual(state.player.pos.y, paddle_home_y())
        self.assertEqual((state.ball.pos.x, state.ball.pos.y), (STAGE_W / 2, STAGE_H / 2))


class TestScoring(unittest.TestCase):
    def test_ball_out_left(self):
        state = new_game()
        state.ball.pos = Vec2(-1, 100)
        with mock.patch("core.random.uniform", return_value=0.0):
            self.assertEqual(check_scoring(state), "AI")
        self.assertEqual((state.score.player, state.score.ai), (0, 1))
        self.assertEqual((state.ball.pos.x, state.ball.pos.y), (STAGE_W / 2, STAGE_H / 2))
        self.assertGreater(state.ball.vel.x, 0)

    def test_ball_out_right(self):
        state = new_game()
        state.ball.pos = Vec2(STAGE_W - 2, 100)
        with mock.patch("core.random.uniform", return_value=0.0):
            self.assertEqual(check_scoring(state), "PLAYER")
        self.assertEqual((state.score.player, state.score.ai), (1, 0))
        self.assertLess(state.ball.vel.x, 0)

    def test_ball_in_play(self):
        state = new_game()
        self.assertIsNone(check_scoring(state))
        self.assertEqual((state.score.player, state.score.ai), (0, 0))


class TestStep(unittest.TestCase):
    def running_game(self):
        state = new_game()
        start_game(state)
        with mock.patch("core.random.uniform", return_value=0.0):
            serve_ball(state.ball, 1)
        return state

    def test_keys_move_player(self):
        state = self.running_game()
        y0 = state.player.pos.y
        step(state, InputSnapshot(up=True), 1.0)
        self.assertAlmostEqual(state.player.pos.y, y0 - state.player.speed)

    def test_keys_beat_pointer(self):
        state = self.running_game()
        y0 = state.player.pos.y
        step(state, InputSnapshot(down=True, pointer_y=0), 1.0)
        self.assertAlmostEqual(state.player.pos.y, y0 + state.player.speed)

    def test_pointer_moves_player(self):
        state = self.running_game()
        step(state, InputSnapshot(pointer_y=100), 1.0)
        self.assertAlmostEqual(state.player.center_y, 100)

    def test_wall_resolved_before_paddle(self):
        state = self.running_game()
        ball, ai = state.ball, state.opponent
        ai.pos.y = STAGE_H - ai.h
        # next move takes the ball past the bottom wall and into the AI paddle
        ball.pos = Vec2(ai.pos.x - 10, STAGE_H - 6)
        ball.vel = Vec2(4, 3)
        ball.speed = 5.0
        step(state, InputSnapshot(), 1.0)

        self.assertEqual(ball.pos.y, STAGE_H - ball.r)
        self.assertEqual(ball.pos.x, ai.pos.x - ball.r)
        offset = (STAGE_H - ball.r - ai.center_y) / (ai.h / 2)
        angle = offset * MAX_BOUNCE_ANGLE
        speed = 5.0 + BALL_SPEED_INC
        self.assertAlmostEqual(ball.vel.x, -math.cos(angle) * speed)
        self.assertAlmostEqual(ball.vel.y, math.sin(angle) * speed)
        self.assertGreater(ball.vel.y, 0)

    def test_fast_ball_on_long_frame_hits_paddle(self):
        state = self.running_game()
        ball, ai = state.ball, state.opponent
        ball.pos = Vec2(ai.pos.x - ball.r, ai.center_y)
        ball.vel = Vec2(MAX_BALL_SPEED, 0)
        ball.speed = MAX_BALL_SPEED
        # one capped frame moves the ball further than paddle plus diameter
        delta = frame_delta(MAX_FRAME_MS)
        self.assertGreater(MAX_BALL_SPEED * delta, ai.w + 2 * ball.r)

        self.assertIsNone(step(state, InputSnapshot(), delta))
        self.assertEqual(ball.pos.x, ai.pos.x - ball.r)
        self.assertAlmostEqual(ball.vel.x, -MAX_BALL_SPEED)
        self.assertAlmostEqual(ball.vel.y, 0.0)
        self.assertEqual((state.score.player, state.score.ai), (0, 0))

    def test_rally_and_point(self):
        state = self.running_game()
        ball = state.ball
        self.assertAlmostEqual(ball.vel.x, BALL_SPEED_BASE)
        self.assertAlmostEqual(ball.vel.y, 0.0)

        # serve straight at the centre of the AI paddle
        for _ in range(200):
            step(state, InputSnapshot(), 1.0)
            if ball.vel.x < 0:
                break
        self.assertAlmostEqual(ball.vel.x, -(BALL_SPEED_BASE + BALL_SPEED_INC))
        self.assertAlmostEqual(ball.vel.y, 0.0)
        self.assertEqual(ball.pos.x, state.opponent.pos.x - ball.r)
        self.assertAlmostEqual(ball.speed, ball.vel.length())

        # second serve with the AI paddle parked at the top
        with mock.patch("core.random.uniform", return_value=0.0):
            serve_ball(ball, 1)
        state.opponent.pos.y = 0
        state.bot.max_speed = 0
        scorer = None
        with mock.patch("core.random.uniform", return_value=0.0):
            for _ in range(200):
                scorer = step(state, InputSnapshot(), 1.0)
                if scorer:
                    break
        self.assertEqual(scorer, "PLAYER")
        self.assertEqual((state.score.player, state.score.ai), (1, 0))
        self.assertEqual((ball.pos.x, ball.pos.y), (STAGE_W / 2, STAGE_H / 2))
        self.assertAlmostEqual(ball.vel.x, -BALL_SPEED_BASE)


if __name__ == '__main__':
    unittest.main()
