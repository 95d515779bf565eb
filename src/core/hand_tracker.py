"""
Seguimiento de la mano usando MediaPipe Tasks (HandLandmarker).

Este módulo extrae los 21 landmarks de una mano por frame y los convierte
al sistema de referencia vertical (eje Y hacia arriba) del clasificador.
"""

import os

import cv2
import mediapipe as mp


# Huesos de la mano como pares de landmarks (pulgar, dedos y palma)
HAND_CONNECTIONS = [
    (0, 1), (1, 2), (2, 3), (3, 4),
    (5, 6), (6, 7), (7, 8),
    (9, 10), (10, 11), (11, 12),
    (13, 14), (14, 15), (15, 16),
    (17, 18), (18, 19), (19, 20),
    (0, 17), (2, 5), (5, 9), (9, 13), (13, 17),
]


def landmarks_to_keypoints(landmarks, width, height):
    """
    Convierte landmarks normalizados (0-1) de MediaPipe a keypoints en píxeles.

    Args:
        landmarks (list): 21 landmarks con atributos x, y, z normalizados
        width (int): Ancho de la imagen
        height (int): Alto de la imagen

    Returns:
        list: 21 dicts {'x', 'y', 'z'} con el eje Y hacia arriba

    Conversión:
        MediaPipe devuelve Y creciente hacia abajo; se invierte (1 - y) * h
        para que "punta más alta que la articulación" sea tip.y > pip.y.
        Z se escala por el ancho, igual que X.
    """
    return [
        {'x': lm.x * width, 'y': (1.0 - lm.y) * height, 'z': lm.z * width}
        for lm in landmarks
    ]


# ============================================================================
class HandTracker:
    """
    Extractor de landmarks con MediaPipe HandLandmarker en modo VIDEO.

    Solo se sigue una mano: el juego no soporta varias manos.
    """

    def __init__(self, model_path, detection_confidence=0.6, tracking_confidence=0.6):
        """
        Inicializa el HandLandmarker.

        Args:
            model_path (str): Ruta al modelo hand_landmarker.task
            detection_confidence (float): Confianza mínima para detectar la mano
            tracking_confidence (float): Confianza mínima para seguirla entre frames
        """
        if not os.path.exists(model_path):
            raise FileNotFoundError(f"Modelo de MediaPipe no encontrado: {model_path}")

        vision = mp.tasks.vision
        options = vision.HandLandmarkerOptions(
            base_options=mp.tasks.BaseOptions(model_asset_path=model_path),
            num_hands=1,
            min_hand_detection_confidence=detection_confidence,
            min_hand_presence_confidence=detection_confidence,
            min_tracking_confidence=tracking_confidence,
            running_mode=vision.RunningMode.VIDEO,
        )
        self.landmarker = vision.HandLandmarker.create_from_options(options)
        self._last_timestamp_ms = -1

    def _detect(self, img, timestamp_ms):
        """Ejecuta el modelo sobre un frame BGR."""
        img_rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=img_rgb)
        return self.landmarker.detect_for_video(mp_image, timestamp_ms)

    def get_keypoints(self, img, timestamp_ms):
        """
        Extrae los landmarks de la mano detectada.

        Args:
            img (np.array): Imagen BGR capturada de la cámara
            timestamp_ms (int): Marca de tiempo del frame en milisegundos

        Returns:
            tuple: (keypoints, result)
                - keypoints: 21 dicts {'x', 'y', 'z'} o None si no hay mano
                - result: Resultado de HandLandmarker (para dibujar)
        """
        # El modo VIDEO exige marcas de tiempo estrictamente crecientes
        timestamp_ms = max(int(timestamp_ms), self._last_timestamp_ms + 1)
        self._last_timestamp_ms = timestamp_ms

        result = self._detect(img, timestamp_ms)
        if not result or not result.hand_landmarks:
            return None, result

        h, w = img.shape[:2]
        return landmarks_to_keypoints(result.hand_landmarks[0], w, h), result

    def draw_hands(self, img, result):
        """Dibuja articulaciones y huesos de la mano detectada."""
        if not result or not result.hand_landmarks:
            return img

        h, w = img.shape[:2]
        points = [(int(lm.x * w), int(lm.y * h)) for lm in result.hand_landmarks[0]]
        for start, end in HAND_CONNECTIONS:
            cv2.line(img, points[start], points[end], (0, 200, 255), 2)
        for point in points:
            cv2.circle(img, point, 4, (255, 100, 0), -1)
        return img

    def close(self):
        self.landmarker.close()
