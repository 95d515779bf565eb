"""
Módulo de síntesis de voz.
Contiene el sistema de feedback auditivo.
"""

from .feedback import VoiceFeedback

__all__ = ['VoiceFeedback']
