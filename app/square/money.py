from decimal import Decimal, ROUND_HALF_UP


def square_money_to_dollars(amount) -> float:
    """Square money amounts are integer minor units (cents)."""
    if not amount:
        return 0.0
    try:
        return int(amount) / 100
    except (TypeError, ValueError):
        return 0.0


def dollars_to_square_money(amount: float) -> int:
    cents = (Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)
