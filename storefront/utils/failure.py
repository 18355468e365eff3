"""Randomized purchase failure used to simulate declined payments."""
import random
from typing import Optional

import storefront.config as config


class FailureInjector:
    """
    Decides whether a purchase attempt is declined.

    Each call to :meth:`should_fail` is an independent draw from the
    injector's own ``random.Random``, so a seeded injector gives a repeatable
    sequence and tests can pin the rate to 0.0 or 1.0.
    """

    def __init__(self, rate: float = 0.2, seed: Optional[int] = None) -> None:
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"Failure rate must be within [0, 1], got {rate}")
        self.rate = rate
        self._random = random.Random(seed)

    def should_fail(self) -> bool:
        # random() is in [0, 1), so rate 0.0 never fails and 1.0 always does
        return self._random.random() < self.rate

    def __repr__(self) -> str:
        return f"FailureInjector(rate={self.rate})"


_failure_injector: Optional[FailureInjector] = None


def get_failure_injector() -> FailureInjector:
    """Return the process-wide injector built from configuration."""
    global _failure_injector
    if _failure_injector is None:
        _failure_injector = FailureInjector(
            rate=config.TRANSACTION_FAILURE_RATE,
            seed=config.TRANSACTION_FAILURE_SEED,
        )
    return _failure_injector
