from typing import NamedTuple

from uniquote.utils.math import div_trunc


class Fraction(NamedTuple):
    """
    An unreduced rational number. Numerator and denominator are kept exactly
    as computed so callers see the same raw values as on-chain math.
    """

    numerator: int
    denominator: int = 1

    @property
    def quotient(self) -> int:
        """
        The integer part, truncated toward zero.
        """
        return div_trunc(self.numerator, self.denominator)

    @property
    def remainder(self) -> "Fraction":
        return Fraction(self.numerator - self.quotient * self.denominator, self.denominator)

    def invert(self) -> "Fraction":
        return Fraction(self.denominator, self.numerator)

    def multiply(self, other: "Fraction | int") -> "Fraction":
        other = other if isinstance(other, Fraction) else Fraction(other)
        return Fraction(self.numerator * other.numerator, self.denominator * other.denominator)

    def less_than(self, other: "Fraction | int") -> bool:
        other = other if isinstance(other, Fraction) else Fraction(other)
        return self.numerator * other.denominator < other.numerator * self.denominator

    def equal_to(self, other: "Fraction | int") -> bool:
        other = other if isinstance(other, Fraction) else Fraction(other)
        return self.numerator * other.denominator == other.numerator * self.denominator
