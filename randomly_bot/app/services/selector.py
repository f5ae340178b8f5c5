"""
Uniform random selection of a single item.

Used for both the winning participant and the celebration image. The
randomness source is passed in explicitly; when omitted, each call gets its
own generator seeded from OS entropy so concurrent turns never share state.
"""
import random
from typing import Optional, Sequence, TypeVar

from randomly_bot.app.errors import InvalidInputError

T = TypeVar("T")


def select_random(items: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """
    Pick one element of ``items`` uniformly at random.

    Args:
        items: Non-empty ordered sequence of candidates
        rng: Optional random source (a fresh ``random.Random()`` if omitted)

    Returns:
        The element at a uniformly drawn index in ``[0, len(items))``

    Raises:
        InvalidInputError: If ``items`` is empty
    """
    if not items:
        raise InvalidInputError("Cannot select from an empty sequence")

    if rng is None:
        rng = random.Random()
    return items[rng.randrange(len(items))]
