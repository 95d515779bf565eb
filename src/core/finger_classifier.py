"""
Clasificador geométrico de dedos extendidos.

Este módulo convierte los 21 landmarks de una mano en el número de dedos
extendidos (0-5), que el juego usa como respuesta del jugador.
"""

import logging

import numpy as np


logger = logging.getLogger(__name__)

KEYPOINT_COUNT = 21

# Índices de landmarks (ver diagrama MediaPipe Hands)
WRIST = 0
THUMB_MCP = 2
THUMB_TIP = 4

# (punta, articulación PIP) de índice, medio, anular y meñique
FINGER_PAIRS = [(8, 6), (12, 10), (16, 14), (20, 18)]

# Pulgar extendido si la punta está 1.5x más lejos de la muñeca que el MCP
THUMB_EXTENSION_RATIO = 1.5

# Afirmación que hace cada número de dedos, según el modo de juego
COMPARISON_LABELS = {1: "a < b", 2: "a > b", 3: "a = b"}
ARITHMETIC_LABELS = {1: "+", 2: "-", 3: "*", 4: "/"}


def _position(point):
    return np.array([point['x'], point['y'], point['z']], dtype=float)


def finger_states(keypoints, thumb_ratio=THUMB_EXTENSION_RATIO):
    """
    Calcula qué dedos están extendidos.

    Args:
        keypoints (list): 21 landmarks {'x', 'y', 'z'} con el eje Y hacia arriba
        thumb_ratio (float): Umbral del pulgar (distancia punta/MCP a muñeca)

    Returns:
        list: [pulgar, índice, medio, anular, meñique] como booleanos

    Raises:
        ValueError: Si no hay exactamente 21 landmarks

    Algoritmo:
        - Pulgar: distancia 3D TIP-WRIST > thumb_ratio * distancia MCP-WRIST
          (el pulgar se abre lateralmente, no verticalmente)
        - Otros dedos: TIP más alto que PIP (tip.y > pip.y)
        - Ambas comparaciones son estrictas
    """
    if len(keypoints) != KEYPOINT_COUNT:
        raise ValueError(
            f"Se esperaban {KEYPOINT_COUNT} landmarks, recibidos {len(keypoints)}"
        )

    wrist = _position(keypoints[WRIST])
    tip_dist = np.linalg.norm(_position(keypoints[THUMB_TIP]) - wrist)
    mcp_dist = np.linalg.norm(_position(keypoints[THUMB_MCP]) - wrist)

    states = [bool(tip_dist > mcp_dist * thumb_ratio)]
    for tip, pip in FINGER_PAIRS:
        states.append(keypoints[tip]['y'] > keypoints[pip]['y'])
    return states


def count_extended_fingers(keypoints, thumb_ratio=THUMB_EXTENSION_RATIO):
    """
    Cuenta dedos extendidos (0-5).

    Función pura: no guarda memoria entre frames ni modifica los landmarks.
    """
    count = sum(finger_states(keypoints, thumb_ratio))
    logger.debug("Dedos extendidos: %d", count)
    return count


def answer_label(count, comparison_mode):
    """
    Texto de la respuesta que representa un número de dedos.

    Returns:
        str o None: "a < b", "+", ... o None si el número no es una respuesta
    """
    labels = COMPARISON_LABELS if comparison_mode else ARITHMETIC_LABELS
    return labels.get(count)
