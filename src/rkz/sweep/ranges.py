"""Scalar or ``start:stop[:step]`` specifications expanded to value sequences."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

import numpy as np

from rkz.common.exceptions import InvalidRange

_STOP_TOL = 1e-9  # in units of step


def _parse_num(text: str) -> float:
    try:
        value = float(text.strip())
    except ValueError as exc:
        raise InvalidRange(f"Can't parse '{text}' as a number") from exc
    if not math.isfinite(value):
        raise InvalidRange(f"Range bound must be finite, got '{text}'")
    return value


@dataclass(frozen=True)
class Range:
    start: float
    stop: float
    step: float = 1.0

    def __post_init__(self):
        if not self.step > 0.0:
            raise InvalidRange(f"Range step must be positive, got {self.step:g}")
        if self.start > self.stop:
            raise InvalidRange(f"Range stop ({self.stop:g}) must not be lower than start ({self.start:g})")

    def __len__(self) -> int:
        span = (self.stop - self.start) / self.step
        return int(math.floor(span + _STOP_TOL)) + 1

    @property
    def is_scalar(self) -> bool:
        return len(self) == 1

    def values(self) -> List[float]:
        """start, start+step, ... up to the last value not beyond stop."""
        k = np.arange(len(self), dtype=float)
        return np.minimum(self.start + k * self.step, self.stop).tolist()


def parse_range(text: str) -> Range:
    fields = str(text).split(":")
    if len(fields) > 3:
        raise InvalidRange(f"Can't parse \"{text}\" as a range")
    nums = [_parse_num(f) for f in fields]
    if len(nums) == 1:
        return Range(nums[0], nums[0])
    return Range(*nums)


def expand(text: str) -> List[float]:
    return parse_range(text).values()
