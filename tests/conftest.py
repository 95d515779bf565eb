import pytest


FINGER_TIPS = {"index": (8, 6), "middle": (12, 10), "ring": (16, 14), "pinky": (20, 18)}


def make_hand(extended=(), thumb_tip_x=2.5):
    """
    Mano sintética de 21 landmarks con muñeca en el origen.

    Dedos no extendidos: punta por debajo del PIP. El pulgar tiene el MCP a
    distancia 2 de la muñeca; thumb_tip_x fija la distancia de la punta.
    """
    points = [{'x': 0.0, 'y': 0.0, 'z': 0.0} for _ in range(21)]
    points[2] = {'x': 2.0, 'y': 0.0, 'z': 0.0}
    points[4] = {'x': 4.0 if "thumb" in extended else thumb_tip_x, 'y': 0.0, 'z': 0.0}
    for name, (tip, pip) in FINGER_TIPS.items():
        points[pip] = {'x': 0.0, 'y': 1.0, 'z': 0.0}
        points[tip] = {'x': 0.0, 'y': 2.0 if name in extended else 0.5, 'z': 0.0}
    return points


class ScriptedRng:
    """Devuelve valores fijos desde randint, en orden."""

    def __init__(self, *values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high
        return value


@pytest.fixture
def hand():
    return make_hand


@pytest.fixture
def scripted_rng():
    return ScriptedRng
