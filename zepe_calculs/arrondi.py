# zepe_calculs/arrondi.py

from decimal import Decimal, ROUND_HALF_UP

DEC = Decimal


def to_decimal(value) -> Decimal:
    # passage par str() : 0.1 reste 0.1 et non 0.1000000000000000055...
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value) -> int:
    """Arrondi à l'unité monétaire la plus proche, les demis s'éloignant de zéro (2.5 -> 3, -2.5 -> -3)."""
    return int(to_decimal(value).quantize(DEC('1'), rounding=ROUND_HALF_UP))
