from uniquote.utils.math import div_trunc


def normalize_decimals(amount: int, from_decimals: int, to_decimals: int, rounding: str = "down") -> int:
    """
    Convert `amount` between units with different decimal places.
    Scales up or down depending on decimals. When scaling down, "down" truncates
    toward zero (on-chain semantics) and "up" uses ceiling division.
    """
    round_down = rounding.lower() == "down"
    if from_decimals > to_decimals:
        # Scale down: divide
        factor = 10 ** (from_decimals - to_decimals)
        if round_down:
            return div_trunc(amount, factor)

        # Ceiling division
        return -((-amount) // factor)

    # Scale up (or equal): multiply
    return amount * 10 ** (to_decimals - from_decimals)


def scale_to_decimals(amount: int, from_decimals: int, to_decimals: int) -> int:
    """
    Scale a value up to a larger number of decimals. Never loses precision.
    """
    if to_decimals < from_decimals:
        raise ValueError(f"Cannot scale {from_decimals} decimals up to {to_decimals}.")

    return amount * 10 ** (to_decimals - from_decimals)
