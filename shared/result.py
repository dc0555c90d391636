"""Result type for decoders that report failures as values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Result(Generic[T, E]):
    """Either a decoded value or the error that stopped decoding."""

    value: Optional[T] = None
    error: Optional[E] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(value=value)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(error=error)

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def map(self, func: Callable[[T], U]) -> "Result[U, E]":
        if self.error is not None:
            return Result(error=self.error)
        assert self.value is not None
        return Result(value=func(self.value))

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error if there is one."""

        if self.error is not None:
            if isinstance(self.error, BaseException):
                raise self.error
            raise RuntimeError(f"Tried to unwrap error result: {self.error}")
        assert self.value is not None
        return self.value


__all__ = ["Result"]
