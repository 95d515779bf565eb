"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase FingerQuizApp.
"""

import time

import cv2

from core.hand_tracker import HandTracker
from core.quiz_engine import QuizEngine
from ui.renderer import UIRenderer
from voice.feedback import VoiceFeedback


# ============================================================================
class FingerQuizApp:
    """
    Aplicación principal del juego de preguntas con dedos.

    Arquitectura:
        - HandTracker: Extrae los 21 landmarks de la mano con MediaPipe
        - QuizEngine: Clasifica dedos, valida respuestas y lleva la puntuación
        - UIRenderer: Renderizado de interfaz gráfica
        - VoiceFeedback: Anuncio por voz de aciertos y fallos
        - FingerQuizApp: Coordinador y bucle principal

    Cada frame es un tick: primero se avanza el reloj del motor con el
    tiempo transcurrido y después se validan los dedos de la mano visible.
    """

    def __init__(self, config):
        """
        Inicializa la aplicación y configura la cámara.

        Args:
            config (GameConfig): Configuración del juego

        Raises:
            Exception: Si no se puede abrir la cámara
        """
        self.config = config

        self.cap = cv2.VideoCapture(config.camera_index)
        if not self.cap.isOpened():
            raise Exception("Error al abrir cámara")

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, config.frame_width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, config.frame_height)
        self.cap.set(cv2.CAP_PROP_BUFFERSIZE, 1)       # Buffer mínimo para baja latencia

        # Obtener dimensiones reales (pueden diferir de las solicitadas)
        self.width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self.height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))

        print(f"OK Camara: {self.width}x{self.height}")

        self.tracker = HandTracker(config.model_path)
        self.engine = QuizEngine(
            comparison_mode=config.comparison_mode,
            generation_delay=config.generation_delay,
            thumb_ratio=config.thumb_extension_ratio,
        )
        self.ui = UIRenderer(self.width, self.height, config)
        self.voice = VoiceFeedback(config)

        self.last_time = time.time()

    def step(self, frame, now):
        """
        Ejecuta un tick completo sobre un frame.

        Args:
            frame (np.array): Frame BGR (ya espejeado si corresponde)
            now (float): Marca de tiempo del frame en segundos

        Returns:
            np.array: Frame con la interfaz dibujada
        """
        self.engine.on_elapsed(max(0.0, now - self.last_time))
        self.last_time = now

        keypoints, results = self.tracker.get_keypoints(frame, now * 1000)
        if keypoints is not None:
            self.engine.on_tick(keypoints)

        self.voice.announce(self.engine.feedback, self.engine.score)

        if self.config.show_skeleton:
            self.tracker.draw_hands(frame, results)
        self.ui.draw_display(frame, self.engine)
        self.ui.draw_finger_count(frame, self.engine.current_finger_count,
                                  keypoints is not None)
        self.ui.draw_guide(frame)
        return frame

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Capturar frame de cámara
            2. Espejear frame (flip horizontal para UI natural)
            3. Avanzar reloj del juego y validar la mano detectada
            4. Renderizar UI y mostrar frame
            5. Repetir hasta ESC o 'q'
        """
        print("\n" + "="*70)
        print(f"JUEGO DE DEDOS - MODO {self.config.mode_name.upper()}")
        print("="*70)
        if self.config.comparison_mode:
            print("\n1 dedo: a < b | 2 dedos: a > b | 3 dedos: a = b")
        else:
            print("\n1 dedo: + | 2 dedos: - | 3 dedos: * | 4 dedos: /")
        print("\nPresiona ESC o 'q' para salir\n")
        print("="*70 + "\n")

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    break

                if self.config.mirror:
                    frame = cv2.flip(frame, 1)

                frame = self.step(frame, time.time())

                cv2.imshow('Juego de Dedos', frame)

                key = cv2.waitKey(1) & 0xFF
                if key == 27 or key == ord('q'):
                    break
        finally:
            self.cap.release()
            self.tracker.close()
            cv2.destroyAllWindows()

        print(f"\nOK Aplicacion cerrada ({self.engine.score_text})")
