"""Short code generation utilities."""

import random
import string
from typing import Callable, Optional


class ShortCodeGenerator:
    """Generate short codes for links."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, default_length: int = 6, rng: Optional[random.Random] = None):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            rng: Random source (a fresh random.Random if not given)
        """
        if default_length < 1:
            raise ValueError("default_length must be positive")
        self.default_length = default_length
        self.rng = rng or random.Random()

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(self.rng.choices(self.BASE62_CHARS, k=length))

    def generate_unique(
        self,
        exists: Callable[[str], bool],
        max_attempts: int = 5,
    ) -> str:
        """Generate a random code for which ``exists`` is false.

        After ``max_attempts`` collisions at one length the length grows by
        one, so the search always terminates.

        Args:
            exists: Predicate telling whether a code is already taken
            max_attempts: Collisions tolerated before growing the length

        Returns:
            Unused short code
        """
        length = self.default_length
        while True:
            for _ in range(max(1, max_attempts)):
                code = self.generate_random(length)
                if not exists(code):
                    return code
            length += 1

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code has valid format (alphanumeric).

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        return bool(code) and all(c in ShortCodeGenerator.BASE62_CHARS for c in code)
