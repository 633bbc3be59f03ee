"""Explicit success/failure values returned by the services.

Services never let a ``DomainException`` escape for an expected
business-rule violation; they return ``service_err(exc)`` instead and
the caller inspects ``result.ok``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from cactus_shop.domain.exceptions import DomainException, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    value: T | None = None
    error: DomainException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def service_ok(value: T) -> ServiceResult[T]:
    return ServiceResult(value=value)


def service_err(error: DomainException) -> ServiceResult:
    return ServiceResult(error=error)
