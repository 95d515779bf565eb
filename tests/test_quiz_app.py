import numpy as np

from app.quiz_app import FingerQuizApp
from config.game_config import GameConfig
from core.quiz_engine import ACTIVE, FEEDBACK_CORRECT, QuizEngine
from ui.renderer import UIRenderer
from voice.feedback import VoiceFeedback


class FakeTracker:
    def __init__(self, keypoints):
        self.keypoints = keypoints
        self.timestamps = []

    def get_keypoints(self, img, timestamp_ms):
        self.timestamps.append(timestamp_ms)
        return self.keypoints, None

    def draw_hands(self, img, result):
        return img


def bare_app(keypoints, engine):
    config = GameConfig()
    config.voice_enabled = False
    app = object.__new__(FingerQuizApp)
    app.config = config
    app.tracker = FakeTracker(keypoints)
    app.engine = engine
    app.ui = UIRenderer(640, 480, config)
    app.voice = VoiceFeedback(config)
    app.last_time = 10.0
    return app


def frame():
    return np.zeros((480, 640, 3), dtype=np.uint8)


def test_generation_and_validation_in_same_tick(hand, scripted_rng):
    engine = QuizEngine(rng=scripted_rng(3, 7))
    app = bare_app(hand(extended=("index",)), engine)

    app.step(frame(), 10.0 + engine.generation_delay)

    assert engine.score == 1
    assert engine.feedback == FEEDBACK_CORRECT
    assert app.last_time == 10.25
    assert app.tracker.timestamps == [10250.0]


def test_count_before_delay_is_not_scored(hand, scripted_rng):
    engine = QuizEngine(rng=scripted_rng(3, 7))
    app = bare_app(hand(extended=("index",)), engine)

    app.step(frame(), 10.1)
    assert engine.score == 0
    assert engine.current_finger_count == 1

    app.step(frame(), 10.2)
    assert engine.score == 0
    assert engine.state != ACTIVE


def test_frame_without_hand_only_advances_clock(scripted_rng):
    engine = QuizEngine(rng=scripted_rng(3, 7))
    app = bare_app(None, engine)

    rendered = app.step(frame(), 10.5)

    assert engine.state == ACTIVE
    assert engine.feedback == ""
    assert rendered.any()
