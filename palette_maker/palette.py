"""
Randomized palette builder.

Palettes grow one step at a time. Each step picks one of five methods at
random, weighted by ``METHOD_WEIGHTS``:

- COMPLEMENT: complement of a randomly chosen existing color (+1)
- RANDOM: a fresh uniformly random color (+1)
- AVERAGED_COMPLEMENT: running average of every current complement (+1)
- TRIAD: triad around a randomly chosen existing color (+2)
- SQUARE: square around a randomly chosen existing color (+3)

Near the end of a run only methods that fit the remaining slots are eligible,
so the palette always lands on the requested size exactly.

Randomness comes from a ``numpy.random.Generator``. Pass ``rng=`` for
reproducible output; otherwise a per-thread generator is used.
"""

from __future__ import annotations
import logging
import threading
from enum import IntEnum
from functools import reduce
from typing import Iterable, List, Mapping, Optional, Tuple

import numpy as np

from .color import Color
from .encodings import Hsl, Rgb
from .harmony import complement, square, triad
from .types.color_types import HUE_MAX, PERMILLE
from .utils.default import value_or_default

logger = logging.getLogger(__name__)


class Method(IntEnum):
    COMPLEMENT = 0
    RANDOM = 1
    AVERAGED_COMPLEMENT = 2
    TRIAD = 3
    SQUARE = 4


METHOD_WEIGHTS: Mapping[Method, float] = {
    Method.COMPLEMENT: 0.3,
    Method.RANDOM: 0.2,
    Method.AVERAGED_COMPLEMENT: 0.1,
    Method.TRIAD: 0.25,
    Method.SQUARE: 0.15,
}

METHOD_YIELD: Mapping[Method, int] = {
    Method.COMPLEMENT: 1,
    Method.RANDOM: 1,
    Method.AVERAGED_COMPLEMENT: 1,
    Method.TRIAD: 2,
    Method.SQUARE: 3,
}

_local = threading.local()


def default_rng() -> np.random.Generator:
    """This thread's generator, created on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = _local.rng = np.random.default_rng()
    return rng


def seed(value: Optional[int] = None) -> None:
    """Reseed this thread's default generator."""
    _local.rng = np.random.default_rng(value)


def generate_color(rng: Optional[np.random.Generator] = None) -> Color:
    """A color from a uniformly random HSL point over the full domain."""
    rng = value_or_default(rng, default_rng())
    h = int(rng.integers(0, HUE_MAX, endpoint=True))
    s = int(rng.integers(0, PERMILLE, endpoint=True))
    l = int(rng.integers(0, PERMILLE, endpoint=True))
    return Color(Hsl(h, s, l))


def _average_rgb(a: Rgb, b: Rgb) -> Rgb:
    return Rgb(tuple((x + y) // 2 for x, y in zip(a, b)))


def averaged_complement(colors: List[Color]) -> Color:
    """
    Fold the complements of ``colors`` into one color.

    Starts from the last color's complement, then averages the running RGB
    with each earlier complement in order. Every channel is averaged on its
    own with integer floor division, so the result depends on order.
    """
    if not colors:
        raise ValueError("averaged_complement needs at least one color")
    complements = [complement(c).rgb for c in colors]
    return Color(reduce(_average_rgb, complements[:-1], complements[-1]))


def eligible_methods(remaining: int) -> Tuple[Method, ...]:
    """Methods whose output fits in ``remaining`` slots."""
    return tuple(m for m in Method if METHOD_YIELD[m] <= remaining)


def _choose_method(
    remaining: int,
    rng: np.random.Generator,
    weights: Mapping[Method, float],
) -> Method:
    eligible = eligible_methods(remaining)
    w = np.array([weights.get(m, 0.0) for m in eligible], dtype=float)
    total = w.sum()
    if total <= 0:
        raise ValueError(f"no positive weight among eligible methods {[m.name for m in eligible]}")
    return eligible[int(rng.choice(len(eligible), p=w / total))]


def _apply(method: Method, palette: List[Color], rng: np.random.Generator) -> List[Color]:
    if method == Method.RANDOM:
        return [generate_color(rng)]
    if method == Method.AVERAGED_COMPLEMENT:
        return [averaged_complement(palette)]

    anchor = palette[int(rng.integers(len(palette)))]
    if method == Method.COMPLEMENT:
        return [complement(anchor)]
    if method == Method.TRIAD:
        return list(triad(anchor))
    return list(square(anchor))


def generate_palette_from_base(
    seed_colors: Iterable[Color],
    target_size: int,
    rng: Optional[np.random.Generator] = None,
    weights: Optional[Mapping[Method, float]] = None,
) -> List[Color]:
    """
    Extend ``seed_colors`` with generated colors up to ``target_size``.

    The seed colors stay at the front of the result, unchanged. A seed that is
    already ``target_size`` long or longer comes back as a new list. Any failure
    while building propagates and no partial palette is returned.

    Args:
        seed_colors: Colors to keep and derive harmonies from
        target_size: Exact length of the result
        rng: Random generator; defaults to this thread's generator
        weights: Per-method weights; defaults to ``METHOD_WEIGHTS``

    Returns:
        List of exactly ``max(target_size, len(seed_colors))`` colors
    """
    if target_size < 0:
        raise ValueError(f"target_size must be non-negative, got {target_size}")

    rng = value_or_default(rng, default_rng())
    weights = value_or_default(weights, METHOD_WEIGHTS)

    palette = list(seed_colors)
    if len(palette) >= target_size:
        return palette

    # every method except RANDOM needs something to derive from
    if not palette:
        palette.append(generate_color(rng))

    while len(palette) < target_size:
        method = _choose_method(target_size - len(palette), rng, weights)
        produced = _apply(method, palette, rng)
        logger.debug(
            "palette %d/%d: %s added %d color(s)",
            len(palette), target_size, method.name.lower(), len(produced),
        )
        palette.extend(produced)

    return palette


def generate_palette(
    target_size: int,
    rng: Optional[np.random.Generator] = None,
    weights: Optional[Mapping[Method, float]] = None,
) -> List[Color]:
    """Build a palette of exactly ``target_size`` colors from scratch."""
    return generate_palette_from_base([], target_size, rng=rng, weights=weights)


def regenerate_palette(
    colors: List[Color],
    rng: Optional[np.random.Generator] = None,
    weights: Optional[Mapping[Method, float]] = None,
) -> List[Color]:
    """
    Replace every unlocked color, keeping locked colors at their indices.

    Locked colors are the base the new colors are derived from.

    Args:
        colors: Current palette, some entries possibly ``locked``
        rng: Random generator; defaults to this thread's generator
        weights: Per-method weights; defaults to ``METHOD_WEIGHTS``

    Returns:
        New list of the same length
    """
    locked = [c for c in colors if c.locked]
    if len(locked) == len(colors):
        return list(colors)

    built = generate_palette_from_base(locked, len(colors), rng=rng, weights=weights)
    fresh = iter(built[len(locked):])
    logger.debug("regenerated %d of %d colors", len(colors) - len(locked), len(colors))
    return [c if c.locked else next(fresh) for c in colors]
