"""Animation selection strategies.

A selector is any callable taking the configured animation list and returning
one entry. Selectors are injected into story generation so tests can get
reproducible output while production keeps random variety.
"""

from __future__ import annotations

import random
import threading
from typing import Literal, Optional, Protocol, Sequence


class AnimationSelector(Protocol):
    """Picks one animation from a non-empty list."""

    def __call__(self, animations: Sequence[str]) -> str: ...


class RandomAnimationSelector:
    """Uniform random pick backed by a private, optionally seeded generator."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def __call__(self, animations: Sequence[str]) -> str:
        if not animations:
            raise ValueError("Animation list is empty")
        with self._lock:
            return self._rng.choice(list(animations))


class RoundRobinAnimationSelector:
    """Cycles through the list in order, one step per call."""

    def __init__(self, start: int = 0):
        self._index = start
        self._lock = threading.Lock()

    def __call__(self, animations: Sequence[str]) -> str:
        if not animations:
            raise ValueError("Animation list is empty")
        with self._lock:
            choice = animations[self._index % len(animations)]
            self._index += 1
        return choice


def create_selector(
    strategy: Literal["random", "round_robin"] = "random",
    seed: Optional[int] = None,
) -> AnimationSelector:
    """Create a selector by strategy name.

    Args:
        strategy: ``random`` or ``round_robin``.
        seed: Seed for ``random``, start offset for ``round_robin``.

    Raises:
        ValueError: If the strategy is unknown.
    """
    if strategy == "random":
        return RandomAnimationSelector(seed)
    if strategy == "round_robin":
        return RoundRobinAnimationSelector(seed or 0)
    raise ValueError(f"Unknown animation strategy: {strategy}")
