"""
Módulo core con la lógica principal del juego.
Contiene el clasificador de dedos, las ecuaciones y el motor de preguntas.

HandTracker (MediaPipe) se importa desde core.hand_tracker.
"""

from .equation import Equation, generate_equation, parse_equation_text
from .finger_classifier import count_extended_fingers, finger_states
from .quiz_engine import QuizEngine

__all__ = [
    'Equation', 'generate_equation', 'parse_equation_text',
    'count_extended_fingers', 'finger_states', 'QuizEngine',
]
