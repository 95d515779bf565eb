"""
Módulo de configuración del juego de dedos.
Contiene la configuración del juego, la voz y la interfaz.
"""

from .game_config import GameConfig

__all__ = ['GameConfig']
