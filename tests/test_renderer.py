import numpy as np
import pytest

from config.game_config import GameConfig
from core.quiz_engine import QuizEngine
from ui.renderer import UIRenderer


@pytest.mark.parametrize("comparison_mode", [True, False])
def test_draws_hud_on_frame(scripted_rng, comparison_mode):
    config = GameConfig()
    config.comparison_mode = comparison_mode
    engine = QuizEngine(comparison_mode=comparison_mode, rng=scripted_rng(3, 7, 0))
    engine.on_elapsed(0.25)
    engine.on_finger_count(2)

    frame = np.zeros((720, 1280, 3), dtype=np.uint8)
    ui = UIRenderer(1280, 720, config)
    ui.draw_display(frame, engine)
    ui.draw_finger_count(frame, engine.current_finger_count, True)
    ui.draw_guide(frame)

    assert frame.any()


def test_draws_without_hand():
    frame = np.zeros((480, 640, 3), dtype=np.uint8)
    ui = UIRenderer(640, 480, GameConfig())
    ui.draw_display(frame, QuizEngine())
    ui.draw_finger_count(frame, 0, False)
    assert frame.any()
