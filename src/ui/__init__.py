"""
Módulo de interfaz de usuario.
Contiene el renderizador de UI y componentes visuales.
"""

from .renderer import UIRenderer

__all__ = ['UIRenderer']
