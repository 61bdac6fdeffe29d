"""Configuration objects for predicate evaluation and hull construction."""
from __future__ import annotations

from dataclasses import dataclass, field

from .constants import DEFAULT_FLOAT_MODE, FLOAT_MODES


@dataclass
class PredicateConfig:
    """How orientation predicates treat floating point coordinates.

    - float_mode='exact': floats and Decimals are converted to Fraction without
      rounding, so every predicate returns the mathematically correct sign.
    - float_mode='native': floats are multiplied as floats. Faster, but colinear
      and near-colinear triples may be misclassified.
    """
    float_mode: str = DEFAULT_FLOAT_MODE

    def __post_init__(self):
        if self.float_mode not in FLOAT_MODES:
            raise ValueError(f"unknown float_mode '{self.float_mode}' (expected one of {FLOAT_MODES})")


@dataclass
class HullConfig:
    """Convex hull options.

    Attributes
    ----------
    predicates : PredicateConfig
        Float handling for every orientation test performed by the scan.
    copy_input : bool
        When False (default) a list argument is sorted and truncated in place
        and becomes the vertex list of the returned polygon. When True the
        caller's list is left untouched.
    """
    predicates: PredicateConfig = field(default_factory=PredicateConfig)
    copy_input: bool = False


__all__ = ['PredicateConfig', 'HullConfig']
