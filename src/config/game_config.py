"""
Configuración del juego de preguntas con dedos.

Este módulo contiene la configuración centralizada del juego, la voz,
la interfaz y la cámara.
"""

from core.finger_classifier import THUMB_EXTENSION_RATIO
from core.quiz_engine import GENERATION_DELAY


# ============================================================================
# CLASE: GameConfig
# Propósito: Configuración de la sesión de juego
# Responsabilidades:
#   - Elegir el modo de juego (comparación o aritmética)
#   - Ajustar umbrales del clasificador y retardo de generación
#   - Almacenar preferencias de voz, interfaz, cámara y logging
# ============================================================================
class GameConfig:
    """
    Configuración de una sesión de juego.

    El modo de juego se fija al crear la sesión y no cambia durante ella.
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CONFIGURACIÓN DEL JUEGO
        # ====================================================================
        self.comparison_mode = True                    # True: a ? b, False: a ? b = r
        self.generation_delay = GENERATION_DELAY       # Segundos antes de cada ecuación
        self.thumb_extension_ratio = THUMB_EXTENSION_RATIO

        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)

        # ====================================================================
        # AYUDAS VISUALES
        # ====================================================================
        self.show_skeleton = True           # Dibujar landmarks y conexiones
        self.show_legend = True             # Mostrar significado de cada número de dedos
        self.mirror = True                  # Espejear la imagen de la cámara

        # ====================================================================
        # CÁMARA Y LOGGING
        # ====================================================================
        self.camera_index = 0
        self.model_path = "hand_landmarker.task"   # Modelo de MediaPipe HandLandmarker
        self.frame_width = 1280
        self.frame_height = 720
        self.log_level = "INFO"

    @property
    def mode_name(self):
        return "comparison" if self.comparison_mode else "arithmetic"

    def apply_args(self, args):
        """
        Sobrescribe los valores por defecto con los argumentos de línea de comandos.

        Args:
            args (argparse.Namespace): Argumentos parseados por main.py

        Solo se aplican las opciones indicadas (las no indicadas valen None).
        """
        if args.mode is not None:
            self.comparison_mode = args.mode == "comparison"
        if args.camera is not None:
            self.camera_index = args.camera
        if args.model is not None:
            self.model_path = args.model
        if args.no_voice:
            self.voice_enabled = False
        if args.log_level is not None:
            self.log_level = args.log_level
        if args.delay is not None:
            self.generation_delay = args.delay
        return self
