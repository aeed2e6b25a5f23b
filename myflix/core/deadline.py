"""Per-request time budget for store calls."""

import time

from myflix.core.exceptions import DependencyError


class Deadline:
    """Monotonic deadline created when a request opens its DB session."""

    def __init__(self, budget_sec: float) -> None:
        self.budget_sec = budget_sec
        self._expires_at = time.monotonic() + budget_sec

    def remaining(self) -> float:
        return max(0.0, self._expires_at - time.monotonic())

    def expired(self) -> bool:
        return time.monotonic() >= self._expires_at

    def check(self, operation: str) -> None:
        """Raise DependencyError if the budget is spent before `operation` starts."""
        if self.expired():
            raise DependencyError(
                f"Request deadline of {self.budget_sec}s exceeded before {operation}",
                detail={"operation": operation},
            )
