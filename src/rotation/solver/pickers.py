"""Strategies for choosing one worker among eligible candidates."""
import random
from typing import Optional, Protocol, Sequence

from rotation.models.worker import Worker


class Picker(Protocol):
    """Chooses one worker from a non-empty candidate list."""

    def pick(self, candidates: Sequence[Worker]) -> Worker:
        ...


class RandomPicker:
    """Uniform random pick. Pass ``seed`` for reproducible runs."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

    def pick(self, candidates: Sequence[Worker]) -> Worker:
        if not candidates:
            raise ValueError("pick() needs at least one candidate")
        return self.rng.choice(candidates)

    def __repr__(self) -> str:
        return f"RandomPicker(seed={self.seed!r})"


class FirstPicker:
    """Deterministic pick of the first candidate in pool order."""

    def pick(self, candidates: Sequence[Worker]) -> Worker:
        if not candidates:
            raise ValueError("pick() needs at least one candidate")
        return candidates[0]

    def __repr__(self) -> str:
        return "FirstPicker()"
