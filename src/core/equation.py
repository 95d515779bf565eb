"""
Ecuaciones del juego de preguntas.

Este módulo contiene el valor inmutable Equation, su generación aleatoria
y el parser del texto mostrado en pantalla.
"""

from dataclasses import dataclass
from typing import Optional


# Rango inclusivo de operandos (1-9, un dígito)
OPERAND_MIN = 1
OPERAND_MAX = 9

# Símbolo mostrado en lugar del operador/relación (el jugador lo adivina)
PLACEHOLDER = "?"

# Orden fijo de operadores: el índice aleatorio se resuelve contra esta tupla
OPERATORS = ("+", "-", "*", "/")

COMPARISON = "comparison"
ARITHMETIC = "arithmetic"

RESULT_TOLERANCE = 1e-6


def apply_operator(a, b, op):
    """
    Calcula a <op> b.

    La división es en coma flotante; la suma, resta y multiplicación
    devuelven enteros.
    """
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        # b nunca es 0 (operandos en 1-9), se mantiene la guarda
        return a / b if b != 0 else 0.0
    raise ValueError(f"Operador desconocido: {op!r}")


def format_result(result):
    """
    Formatea un resultado para el display.

    Formateo:
        - 8 → "8", 2.0 → "2" (enteros sin decimales)
        - 2.3333333 → "2.333333" (máximo 6 decimales, sin ceros finales)
    """
    if isinstance(result, float):
        if result.is_integer():
            return str(int(result))
        return f"{result:.6f}".rstrip('0').rstrip('.')
    return str(result)


# ============================================================================
# CLASE: Equation
# Propósito: Valor inmutable con la pregunta activa
# Responsabilidades:
#   - Guardar operandos, operador y resultado precalculado
#   - Generar el texto de display (vista derivada, siempre regenerable)
#   - Validar la afirmación que hace el jugador con sus dedos
# ============================================================================
@dataclass(frozen=True)
class Equation:
    """
    Ecuación mostrada al jugador.

    Variantes:
        - Comparación: solo a y b. La relación la aporta el jugador.
        - Aritmética: a, b, operador elegido y resultado precalculado.

    Una ecuación nunca se modifica: al acertar se reemplaza por otra nueva.
    """

    kind: str
    a: int
    b: int
    operator: Optional[str] = None
    result: Optional[float] = None

    @classmethod
    def comparison(cls, a, b):
        return cls(COMPARISON, a, b)

    @classmethod
    def arithmetic(cls, a, b, op):
        return cls(ARITHMETIC, a, b, op, apply_operator(a, b, op))

    @property
    def is_comparison(self) -> bool:
        return self.kind == COMPARISON

    @property
    def text(self) -> str:
        """Texto de display: "a ? b" o "a ? b = resultado"."""
        if self.is_comparison:
            return f"{self.a} {PLACEHOLDER} {self.b}"
        return f"{self.a} {PLACEHOLDER} {self.b} = {format_result(self.result)}"

    def check_comparison(self, relation: str) -> bool:
        """
        Valida una relación afirmada por el jugador.

        Args:
            relation (str): "<", ">" o "="
        """
        if relation == "<":
            return self.a < self.b
        if relation == ">":
            return self.a > self.b
        if relation == "=":
            return self.a == self.b
        raise ValueError(f"Relación desconocida: {relation!r}")

    def check_operator(self, op: str) -> bool:
        """
        Valida que a <op> b sea igual al resultado mostrado.

        La comparación es de igualdad exacta (también para la división):
        el resultado se calculó con la misma operación.
        """
        return apply_operator(self.a, self.b, op) == self.result


def generate_equation(comparison_mode, rng):
    """
    Genera una ecuación nueva con operandos uniformes en [1, 9].

    Args:
        comparison_mode (bool): True para comparación, False para aritmética
        rng: Objeto con randint(min, max) inclusivo (ej: random.Random)

    Returns:
        Equation: Ecuación recién generada
    """
    a = rng.randint(OPERAND_MIN, OPERAND_MAX)
    b = rng.randint(OPERAND_MIN, OPERAND_MAX)
    if comparison_mode:
        return Equation.comparison(a, b)
    op = OPERATORS[rng.randint(0, len(OPERATORS) - 1)]
    return Equation.arithmetic(a, b, op)


def parse_equation_text(text, comparison_mode):
    """
    Recupera operandos (y resultado) desde el texto de display.

    Args:
        text (str): Texto generado por Equation.text
        comparison_mode (bool): Formato esperado

    Returns:
        tuple: (a, b) en comparación, (a, b, resultado) en aritmética

    Raises:
        ValueError: Si el texto no sigue el formato esperado
    """
    parts = text.split(" ")
    expected = 3 if comparison_mode else 5
    if len(parts) != expected or parts[1] != PLACEHOLDER:
        raise ValueError(f"Texto de ecuación mal formado: {text!r}")
    if not comparison_mode and parts[3] != "=":
        raise ValueError(f"Texto de ecuación mal formado: {text!r}")

    a = int(parts[0])
    b = int(parts[2])
    if comparison_mode:
        return a, b
    return a, b, float(parts[4])
