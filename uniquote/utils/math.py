def div_trunc(numerator: int, denominator: int) -> int:
    """
    Integer division truncating toward zero, the way the EVM and big-int
    libraries divide. Python's ``//`` floors, which differs for negative operands.
    """
    if denominator == 0:
        raise ZeroDivisionError("Division by zero.")

    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def isqrt(value: int) -> int:
    """
    Floor of the square root of a non-negative integer, using the Babylonian
    method. The estimate decreases monotonically and the loop stops as soon
    as it would no longer decrease.

    Args:
        value (int): A non-negative integer of any size.

    Returns:
        int: The largest ``z`` such that ``z * z <= value``.

    Raises:
        ValueError: If ``value`` is negative.
    """
    if value < 0:
        raise ValueError("NEGATIVE")

    if value > 3:
        z = value
        x = value // 2 + 1
        while x < z:
            z = x
            x = (value // x + x) // 2

        return z

    # 1, 2 and 3 floor to 1.
    return 1 if value != 0 else 0
