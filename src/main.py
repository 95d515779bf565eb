"""
Punto de entrada del juego de preguntas con dedos.

Uso:
    python src/main.py                      # modo comparación (a ? b)
    python src/main.py --mode arithmetic    # modo aritmética (a ? b = r)
"""

import argparse
import logging
import sys

from app.quiz_app import FingerQuizApp
from config.game_config import GameConfig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Juego de preguntas controlado con los dedos")
    parser.add_argument(
        "--mode",
        choices=("comparison", "arithmetic"),
        default=None,
        help="Tipo de ecuación durante toda la sesión (por defecto: comparison)",
    )
    parser.add_argument("--camera", type=int, default=None, help="Índice de la cámara")
    parser.add_argument("--model", default=None,
                        help="Ruta al modelo hand_landmarker.task de MediaPipe")
    parser.add_argument("--delay", type=float, default=None,
                        help="Segundos antes de mostrar cada ecuación nueva")
    parser.add_argument("--no-voice", action="store_true", help="Desactivar feedback por voz")
    parser.add_argument("--log-level", default=None,
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def main(argv=None):
    """
    Crea la configuración, configura el logging y ejecuta la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre por usuario
        - Exception general: Muestra el error y el traceback
    """
    config = GameConfig().apply_args(parse_args(argv))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        app = FingerQuizApp(config)
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
