from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import CommsError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> CommsError:
        raise ValueError(f"called unwrap_err on {self!r}")


@dataclass(frozen=True, slots=True)
class Err:
    error: CommsError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise self.error

    def unwrap_err(self) -> CommsError:
        return self.error


CommsResult = Union[Ok[T], Err]
