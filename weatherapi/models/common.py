"""Common types and helpers shared across models."""

from dataclasses import dataclass
from datetime import timedelta, timezone
from typing import Generic, TypeAlias, TypeVar, Union

from weatherapi.errors import WeatherError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: WeatherError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result: TypeAlias = Union[Ok[T], Err]


def display_timezone(utc_offset_hours: int) -> timezone:
    """Fixed-offset zone used for every rendered time; never the system zone."""
    return timezone(timedelta(hours=utc_offset_hours))
