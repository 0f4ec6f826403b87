from collections.abc import Callable
from typing import Any, NamedTuple

from uniquote.exceptions import PairError, PairErrorKind


class Result(NamedTuple):
    value: Any = None
    """
    The successful value, e.g. an ``(amount, pair)`` tuple for swaps.
    """

    error: PairError | None = None
    """
    The failure, when the computation did not succeed.
    """

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> PairErrorKind | None:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> Any:
        """
        Return the value or raise the captured error.
        """
        if self.error is not None:
            raise self.error

        return self.value


def attempt(fn: Callable[..., Any], *args, **kwargs) -> Result:
    """
    Call ``fn`` and capture any :class:`~uniquote.exceptions.PairError` in a
    :class:`Result` instead of raising it. Other exceptions propagate.
    """
    try:
        value = fn(*args, **kwargs)
    except PairError as err:
        return Result(error=err)

    return Result(value=value)
