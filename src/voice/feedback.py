"""
Sistema de feedback por voz usando pyttsx3.

Este módulo anuncia aciertos y fallos del jugador, ejecutándose de forma
asíncrona para no bloquear el bucle de frames.
"""

import threading
import pyttsx3
from collections import deque


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Anunciar "Correct!" / "Incorrect!" cuando cambia el feedback
#   - Ejecutar en hilo separado para no bloquear el juego
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (un mensaje a la vez)
        - Solo habla cuando el feedback o la puntuación cambian: el motor
          revalida cada frame y repetiría el mismo mensaje sin parar
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (GameConfig): Configuración del juego
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)  # Cola de máximo 5 mensajes
        self._last_announced = ("", 0)        # (feedback, score) ya anunciados

        if not self.config.voice_enabled:
            return

        try:
            self.engine = pyttsx3.init()
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.voice_rate)
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.config.voice_enabled = False

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar

        Returns:
            bool: True si el mensaje se encoló
        """
        if not self.config.voice_enabled or not self.engine:
            return False

        self.message_queue.append(text)

        if not self.is_speaking:
            # Se marca antes de arrancar el hilo: un solo worker a la vez
            self.is_speaking = True
            thread = threading.Thread(target=self._process_queue, daemon=True)
            thread.start()
        return True

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while len(self.message_queue) > 0:
            message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

        self.is_speaking = False

    def announce(self, feedback, score):
        """
        Anuncia el feedback de la sesión si cambió desde el último anuncio.

        Args:
            feedback (str): "Correct!", "Incorrect!" o ""
            score (int): Puntuación actual

        Returns:
            bool: True si se encoló un mensaje de voz
        """
        if not feedback or (feedback, score) == self._last_announced:
            return False
        self._last_announced = (feedback, score)
        return self.speak(feedback)
