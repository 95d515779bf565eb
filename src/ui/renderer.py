"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el estado del juego
sobre el frame de la cámara.
"""

import cv2

from core.finger_classifier import ARITHMETIC_LABELS, COMPARISON_LABELS, answer_label
from core.quiz_engine import FEEDBACK_CORRECT, FEEDBACK_INCORRECT


FEEDBACK_COLORS = {
    FEEDBACK_CORRECT: (100, 255, 100),     # Verde
    FEEDBACK_INCORRECT: (100, 100, 255),   # Rojo (BGR)
}


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para el juego de preguntas.

    Componentes visuales:
        1. Display principal: ecuación activa, feedback y puntuación
        2. Indicador de dedos: número detectado y respuesta que representa
        3. Leyenda lateral: qué afirma cada número de dedos en el modo activo
    """

    def __init__(self, width, height, config):
        """
        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (GameConfig): Configuración del juego
        """
        self.width = width
        self.height = height
        self.config = config

    def draw_display(self, img, engine):
        """
        Dibuja el display principal del juego.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            engine (QuizEngine): Sesión con el estado actual

        Componentes:
            1. Fondo semi-transparente oscuro
            2. Ecuación activa (o "..." mientras se genera la siguiente)
            3. Feedback del último intento (verde acierto, rojo fallo)
            4. Puntuación "Score: N"
        """
        x, y, w, h = 30, 30, min(self.width - 60, 700), 200

        overlay = img.copy()
        cv2.rectangle(overlay, (x, y), (x + w, y + h), (35, 35, 35), -1)
        cv2.addWeighted(overlay, 0.85, img, 0.15, 0, img)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 200, 255), 3)

        equation = engine.current_equation_text or "..."
        cv2.putText(img, equation, (x + 20, y + 80),
                    cv2.FONT_HERSHEY_DUPLEX, 2.2, (255, 255, 255), 3)

        if engine.feedback:
            color = FEEDBACK_COLORS.get(engine.feedback, (200, 200, 200))
            cv2.putText(img, engine.feedback, (x + 20, y + 140),
                        cv2.FONT_HERSHEY_DUPLEX, 1.2, color, 2)

        cv2.putText(img, engine.score_text, (x + 20, y + 185),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.9, (200, 200, 200), 2)

    def draw_finger_count(self, img, count, hand_seen):
        """Dibuja el número de dedos detectado y la respuesta asociada."""
        x, y = 30, self.height - 60
        if not hand_seen:
            cv2.putText(img, "Sin mano", (x, y),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.9, (150, 150, 150), 2)
            return

        label = answer_label(count, self.config.comparison_mode)
        text = f"Dedos: {count}" + (f"  ({label})" if label else "")
        cv2.putText(img, text, (x, y),
                    cv2.FONT_HERSHEY_DUPLEX, 1.1, (0, 255, 255), 2)

    def draw_guide(self, img):
        """Dibuja la leyenda de respuestas del modo de juego activo."""
        if not self.config.show_legend:
            return

        if self.config.comparison_mode:
            title, labels = "COMPARAR", COMPARISON_LABELS
        else:
            title, labels = "OPERADOR", ARITHMETIC_LABELS

        x, y = self.width - 260, 30
        w, h = 230, 60 + 35 * len(labels)

        overlay = img.copy()
        cv2.rectangle(overlay, (x, y), (x + w, y + h), (25, 25, 25), -1)
        cv2.addWeighted(overlay, 0.85, img, 0.15, 0, img)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 100, 100), 2)

        cv2.putText(img, title, (x + 15, y + 35),
                    cv2.FONT_HERSHEY_DUPLEX, 0.8, (100, 200, 255), 2)

        cy = y + 70
        for count, label in sorted(labels.items()):
            cv2.putText(img, f"{count} dedo(s): {label}", (x + 15, cy),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.6, (200, 200, 200), 1)
            cy += 35
