"""
Módulo de la aplicación principal.
Contiene la clase que integra todos los componentes.
"""

from .quiz_app import FingerQuizApp

__all__ = ['FingerQuizApp']
