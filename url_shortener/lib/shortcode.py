"""Short code generation utilities."""

import secrets
import string
from typing import Callable, Optional, Sequence

from .errors import RandomSourceError


class ShortCodeGenerator:
    """Generate random short codes from a secure random source."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_lowercase + string.ascii_uppercase + string.digits

    def __init__(
        self,
        default_length: int = 6,
        alphabet: str = BASE62_CHARS,
        choice: Optional[Callable[[Sequence[str]], str]] = None,
    ):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            alphabet: Symbols codes are drawn from
            choice: Picks one symbol uniformly; defaults to secrets.choice
        """
        if default_length <= 0:
            raise ValueError("default_length must be positive")
        if not alphabet:
            raise ValueError("alphabet must not be empty")

        self.default_length = default_length
        self.alphabet = alphabet
        self._choice = choice or secrets.choice

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Every symbol is drawn independently, so two calls never depend on
        each other or on the URL being shortened.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code

        Raises:
            RandomSourceError: If the random source fails
        """
        length = length or self.default_length
        try:
            return ''.join(self._choice(self.alphabet) for _ in range(length))
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"Secure random source failed: {e}") from e
