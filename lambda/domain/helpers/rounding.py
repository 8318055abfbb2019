"""
Rounding Helper - Arredondamento decimal das métricas expostas
Meio arredondado para longe do zero (2.25 -> 2.3, -2.25 -> -2.3)
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union


def round_half_away(value: Optional[Union[float, Decimal]], digits: int = 1) -> float:
    """
    Arredonda para `digits` casas decimais, metade para longe do zero

    Usa a representação textual do float para que 0.25 seja tratado
    como 0.25 e não como 0.2499999...

    Args:
        value: Valor a arredondar (None é tratado como 0)
        digits: Número de casas decimais

    Returns:
        Valor arredondado
    """
    if value is None:
        return 0.0
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def round_int(value: Optional[float]) -> int:
    """Arredonda para inteiro (umidade, direção do vento)"""
    return int(round_half_away(value, 0))


def format_number(value: float) -> str:
    """Formata valor sem zero decimal supérfluo (35.0 -> '35', 12.5 -> '12.5')"""
    return f"{value:g}"
