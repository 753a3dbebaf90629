"""
Step types — the ordered checkout pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from storefront._types import CheckoutError


class Step(StrEnum):
    """
    Checkout step. Values are the `?step=` query values.

    Ordering: ADDRESS < DELIVERY < PAYMENT < REVIEW.
    """

    ADDRESS = "address"
    DELIVERY = "delivery"
    PAYMENT = "payment"
    REVIEW = "review"

    @property
    def position(self) -> int:
        return STEPS.index(self)

    @property
    def predecessor(self) -> Step | None:
        i = self.position
        return STEPS[i - 1] if i > 0 else None

    @classmethod
    def parse(cls, value: str | None) -> Step | None:
        """Step named by a query value; None for missing or unknown values."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


STEPS: tuple[Step, ...] = (Step.ADDRESS, Step.DELIVERY, Step.PAYMENT, Step.REVIEW)


@dataclass(frozen=True, slots=True)
class StepGateError(CheckoutError):
    """
    Requested step cannot be entered yet.

    The caller stays on `redirect_to`, the earliest incomplete step.
    """

    code: ClassVar[str] = "step_gate"

    requested: Step = Step.ADDRESS
    redirect_to: Step = Step.ADDRESS


@dataclass(frozen=True, slots=True)
class CheckoutProgress:
    """Everything the presentation layer needs to draw the step list."""

    active: Step
    allowed: frozenset[Step]
    completed: frozenset[Step]

    def is_open(self, step: Step) -> bool:
        return step is self.active

    def can_edit(self, step: Step) -> bool:
        """A finished step that is not open shows an edit affordance."""
        return step in self.completed and step is not self.active


__all__ = ("Step", "STEPS", "StepGateError", "CheckoutProgress")
