"""Random heroku-like name generator."""

import logging
import threading
from typing import Optional

from .exceptions import InvalidTokenLengthError
from .models import HEX_CHARS, HaikunatorParams

logger = logging.getLogger(__name__)


class Haikunator:
    """Generates names like ``flying-bat-4821``.

    A name is an adjective, a noun and a random token joined by a delimiter.
    Empty segments (no adjectives, no nouns, zero token length or an empty
    alphabet) are left out of the result instead of raising.

    Configuration lives in public attributes and may be changed between calls.
    The random source is owned by the instance; ``generate`` takes an internal
    lock for every draw sequence, so a single instance can be shared across
    threads.

    Example:
        h = Haikunator(HaikunatorParams(token_length=8, token_hex=True))
        h.generate()  # "silent-otter-3fa09c1e"
    """

    def __init__(self, params: Optional[HaikunatorParams] = None):
        """Initialize Haikunator.

        Args:
            params: Generator settings (default: bundled word lists, "-",
                four decimal digits)

        Raises:
            InvalidTokenLengthError: If token_length is negative or not an int
        """
        if params is None:
            params = HaikunatorParams()

        self._rng = params.rng
        self._lock = threading.Lock()

        self.adjectives = params.adjectives
        self.nouns = params.nouns
        self.delimiter = params.delimiter
        self.token_length = params.token_length
        self.token_hex = params.token_hex
        self.token_chars = params.token_chars

        logger.debug(
            f"Haikunator ready: {len(self.adjectives)} adjectives, "
            f"{len(self.nouns)} nouns, token_length={self.token_length}"
        )

    @property
    def token_length(self) -> int:
        return self._token_length

    @token_length.setter
    def token_length(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTokenLengthError(f"token_length must be an integer, got {value!r}")
        if value < 0:
            raise InvalidTokenLengthError(f"token_length must be >= 0, got {value}")
        self._token_length = value

    @property
    def alphabet(self) -> str:
        """Characters eligible for the token segment."""
        return HEX_CHARS if self.token_hex else self.token_chars

    def generate(self) -> str:
        """Generate a random name.

        Returns:
            Non-empty segments joined by the delimiter, e.g. "flying-bat-4821".
            Empty string if every segment is empty.
        """
        # str indexing is per codepoint, so multi-byte alphabets draw evenly
        alphabet = self.alphabet

        with self._lock:
            adjective = self._pick(self.adjectives)
            noun = self._pick(self.nouns)

            token = ""
            if alphabet and self.token_length:
                count = len(alphabet)
                token = "".join(
                    alphabet[self._rng.randrange(count)]
                    for _ in range(self.token_length)
                )

        parts = [part for part in (adjective, noun, token) if part]
        return self.delimiter.join(parts)

    def _pick(self, words) -> str:
        """Draw one word, or "" if there is nothing to draw from."""
        if not words:
            return ""
        return words[self._rng.randrange(len(words))]


_default: Optional[Haikunator] = None
_default_lock = threading.Lock()


def get_haikunator() -> Haikunator:
    """Get the shared default Haikunator, creating it on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Haikunator()
        return _default


def haikunate() -> str:
    """Generate a name with the default settings.

    Returns:
        A name in the format: {adjective}-{noun}-{4 digits}
        Example: "misty-river-0427"
    """
    return get_haikunator().generate()
