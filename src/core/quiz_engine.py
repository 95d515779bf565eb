"""
Motor del juego de preguntas controlado por dedos.

Este módulo contiene la clase QuizEngine, que genera ecuaciones con retardo,
valida la respuesta del jugador en cada frame y lleva la puntuación.
"""

import logging
import random

from .equation import generate_equation
from .finger_classifier import THUMB_EXTENSION_RATIO, count_extended_fingers


logger = logging.getLogger(__name__)

AWAITING_GENERATION = "awaiting_generation"
ACTIVE = "active"

FEEDBACK_CORRECT = "Correct!"
FEEDBACK_INCORRECT = "Incorrect!"

# Retardo antes de mostrar cada ecuación nueva (segundos)
GENERATION_DELAY = 0.25

# Dedos → relación afirmada (modo comparación)
COMPARISON_ANSWERS = {1: "<", 2: ">", 3: "="}

# Dedos → operador afirmado (modo aritmética)
ARITHMETIC_ANSWERS = {1: "+", 2: "-", 3: "*", 4: "/"}


class OneShotTimer:
    """
    Temporizador de un solo disparo avanzado manualmente con advance(dt).

    Armar de nuevo reemplaza al temporizador pendiente: nunca hay más de
    una callback esperando.
    """

    def __init__(self):
        self.remaining = None
        self.callback = None

    @property
    def pending(self):
        return self.callback is not None

    def arm(self, delay, callback):
        if self.pending:
            logger.debug("Temporizador pendiente reemplazado")
        self.remaining = delay
        self.callback = callback

    def cancel(self):
        self.remaining = None
        self.callback = None

    def advance(self, dt):
        """Descuenta dt y dispara la callback si el tiempo se agotó."""
        if not self.pending:
            return False
        self.remaining -= dt
        if self.remaining > 0:
            return False
        callback = self.callback
        self.cancel()
        callback()
        return True


# ============================================================================
# CLASE: QuizEngine
# Propósito: Máquina de estados del juego
# Responsabilidades:
#   - Generar ecuaciones (comparación o aritmética) tras un retardo
#   - Validar el número de dedos contra la ecuación activa
#   - Gestionar puntuación y mensaje de feedback
# ============================================================================
class QuizEngine:
    """
    Estado de una sesión de juego.

    Estados:
        awaiting_generation → active → (acierto → awaiting_generation
                                        | fallo → active)

    Modelo de operación:
        1. Al crear la sesión se arma la generación retardada (0.25s)
        2. on_elapsed(dt) avanza el reloj y dispara la generación
        3. on_tick(keypoints) clasifica la mano y valida la respuesta
        4. Acierto: +1 punto, "Correct!" y vuelta a awaiting_generation
        5. Fallo: "Incorrect!" y la misma ecuación sigue activa

    La validación se hace en CADA frame sin detección de flancos: un gesto
    mantenido puntúa de nuevo contra la siguiente ecuación en cuanto se activa.
    """

    def __init__(self, comparison_mode=True, rng=None,
                 generation_delay=GENERATION_DELAY,
                 thumb_ratio=THUMB_EXTENSION_RATIO):
        """
        Inicializa la sesión y arma la primera generación.

        Args:
            comparison_mode (bool): True = comparación, False = aritmética
            rng: Generador con randint(min, max) inclusivo (random.Random por defecto)
            generation_delay (float): Retardo antes de cada ecuación nueva
            thumb_ratio (float): Umbral del pulgar para el clasificador
        """
        self.comparison_mode = comparison_mode
        self.rng = rng if rng is not None else random.Random()
        self.generation_delay = generation_delay
        self.thumb_ratio = thumb_ratio

        self.equation = None              # Ecuación activa (None mientras se genera)
        self.score = 0                    # Puntuación (nunca decrece)
        self.feedback = ""                # Último mensaje de feedback
        self.current_finger_count = 0     # Dedos del último frame
        self.state = AWAITING_GENERATION
        self._timer = OneShotTimer()

        self._enter_awaiting_generation()

    # ------------------------------------------------------------------
    # Vistas para la interfaz
    # ------------------------------------------------------------------
    @property
    def current_equation_text(self):
        return self.equation.text if self.equation else ""

    @property
    def score_text(self):
        return f"Score: {self.score}"

    @property
    def generation_pending(self):
        return self._timer.pending

    # ------------------------------------------------------------------
    # Eventos externos
    # ------------------------------------------------------------------
    def on_elapsed(self, dt):
        """
        Avanza el reloj de la sesión.

        Args:
            dt (float): Tiempo transcurrido desde la llamada anterior

        Raises:
            ValueError: Si dt es negativo
        """
        if dt < 0:
            raise ValueError(f"Tiempo transcurrido negativo: {dt}")
        self._timer.advance(dt)

    def on_tick(self, keypoints):
        """
        Procesa los landmarks de un frame.

        Returns:
            int: Número de dedos extendidos detectado
        """
        count = count_extended_fingers(keypoints, self.thumb_ratio)
        self.on_finger_count(count)
        return count

    def on_finger_count(self, count):
        """
        Valida un número de dedos contra la ecuación activa.

        Números fuera del rango reconocido no son respuesta (no hacen nada).
        """
        self.current_finger_count = count
        if self.state != ACTIVE:
            return

        if self.comparison_mode:
            relation = COMPARISON_ANSWERS.get(count)
            if relation is None:
                return
            correct = self.equation.check_comparison(relation)
        else:
            op = ARITHMETIC_ANSWERS.get(count)
            if op is None:
                return
            correct = self.equation.check_operator(op)

        if correct:
            self._on_correct()
        else:
            self.feedback = FEEDBACK_INCORRECT

    # ------------------------------------------------------------------
    # Transiciones internas
    # ------------------------------------------------------------------
    def _on_correct(self):
        self.score += 1
        self.feedback = FEEDBACK_CORRECT
        logger.info("Respuesta correcta a '%s' (%s)",
                    self.equation.text, self.score_text)
        self._enter_awaiting_generation()

    def _enter_awaiting_generation(self):
        self.state = AWAITING_GENERATION
        self.equation = None
        self._timer.arm(self.generation_delay, self._generate)

    def _generate(self):
        self.equation = generate_equation(self.comparison_mode, self.rng)
        self.state = ACTIVE
        logger.debug("Nueva ecuación: %s", self.equation.text)
