"""Data models for Haikunator."""

import random
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from .words import DEFAULT_ADJECTIVES, DEFAULT_NOUNS

HEX_CHARS = "0123456789abcdef"
DEFAULT_DELIMITER = "-"
DEFAULT_TOKEN_LENGTH = 4
DEFAULT_TOKEN_CHARS = "0123456789"


class RandomSource(Protocol):
    """Stateful source of uniform integers in ``[0, n)``.

    ``random.Random``, a seeded ``random.Random(seed)`` and
    ``random.SystemRandom`` all satisfy it.
    """

    def randrange(self, stop: int) -> int: ...


@dataclass
class HaikunatorParams:
    """Settings used by ``Haikunator`` when generating names.

    Note: when ``token_hex`` is true, ``token_chars`` is ignored.
    """

    adjectives: Sequence[str] = DEFAULT_ADJECTIVES
    nouns: Sequence[str] = DEFAULT_NOUNS
    delimiter: str = DEFAULT_DELIMITER
    token_length: int = DEFAULT_TOKEN_LENGTH
    token_hex: bool = False
    token_chars: str = DEFAULT_TOKEN_CHARS
    rng: RandomSource = field(default_factory=random.Random)
