"""
Pure domain entities (POPOs).
No dependency on Django or the network.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Iterator, Tuple

from apps.converter.domain.amounts import MAX_EXPONENT


@dataclass(frozen=True)
class Currency:

    code: str
    description: str = field(default="", compare=False)

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code:
            raise ValueError("Currency code must be a non-empty string")

    def __str__(self):
        return self.code


@dataclass(frozen=True)
class ConversionRequest:

    source: Currency
    target: Currency
    amount: Decimal

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            raise TypeError(f"amount must be a Decimal, got {type(self.amount).__name__}")
        if not self.amount.is_finite():
            raise ValueError(f"amount must be finite, got {self.amount}")
        if self.amount and abs(self.amount.adjusted()) > MAX_EXPONENT:
            raise ValueError(f"amount magnitude out of range, got {self.amount}")


class ConversionOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one request: a pass-through payload or a failure reason."""

    request: ConversionRequest
    outcome: ConversionOutcome
    payload: bytes | None = None
    reason: str | None = None

    def __post_init__(self):
        if self.outcome is ConversionOutcome.SUCCESS and self.payload is None:
            raise ValueError("a successful result needs a payload")
        if self.outcome is ConversionOutcome.FAILURE and not self.reason:
            raise ValueError("a failed result needs a reason")

    @classmethod
    def success(cls, request: ConversionRequest, payload: bytes) -> "ConversionResult":
        return cls(request=request, outcome=ConversionOutcome.SUCCESS, payload=payload)

    @classmethod
    def failure(cls, request: ConversionRequest, reason: str) -> "ConversionResult":
        return cls(request=request, outcome=ConversionOutcome.FAILURE, reason=reason)

    @property
    def succeeded(self) -> bool:
        return self.outcome is ConversionOutcome.SUCCESS

    @property
    def target(self) -> Currency:
        return self.request.target

    @property
    def text(self) -> str:
        """Payload decoded for display; empty for failures."""
        if self.payload is None:
            return ""
        return self.payload.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class ConversionBatch:
    """One source/amount converted against an ordered list of targets."""

    source: Currency
    amount: Decimal
    results: Tuple[ConversionResult, ...]

    def __len__(self):
        return len(self.results)

    def __iter__(self) -> Iterator[ConversionResult]:
        return iter(self.results)

    @property
    def targets(self) -> Tuple[Currency, ...]:
        return tuple(result.target for result in self.results)

    @property
    def failures(self) -> Tuple[ConversionResult, ...]:
        return tuple(result for result in self.results if not result.succeeded)
