"""Short code generation utilities."""

import logging
import random
import string
from typing import Optional

from .database.base import URLStoreBase
from .exceptions import GeneratorExhaustedError


class ShortCodeGenerator:
    """Generate short codes that are free in the store at generation time."""

    # Base36 characters (lowercase letters and digits)
    BASE36_CHARS = string.ascii_lowercase + string.digits  # a-z0-9

    def __init__(
        self,
        store: URLStoreBase,
        length: int = 6,
        alphabet: str = BASE36_CHARS,
        max_attempts: int = 10,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize short code generator.

        Args:
            store: Store probed for collisions
            length: Length of generated codes
            alphabet: Characters codes are drawn from
            max_attempts: Candidates tried before giving up
            logger: Optional logger
        """
        if length < 1:
            raise ValueError("Short code length must be at least 1")
        if not alphabet:
            raise ValueError("Alphabet must not be empty")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.store = store
        self.length = length
        self.alphabet = alphabet
        self.max_attempts = max_attempts
        self.logger = logger or logging.getLogger(__name__)
        self._random = random.SystemRandom()

    def generate_random(self) -> str:
        """Draw one candidate code uniformly from the alphabet.

        Returns:
            Random short code (not checked against the store)
        """
        return ''.join(self._random.choices(self.alphabet, k=self.length))

    async def generate(self) -> str:
        """Generate a code that does not exist in the store.

        The store is only probed; the code is not reserved.

        Returns:
            Unique short code

        Raises:
            GeneratorExhaustedError: If every attempt collided
        """
        for attempt in range(self.max_attempts):
            code = self.generate_random()

            if not await self.store.has(code):
                if attempt:
                    self.logger.debug(f"Generated code after {attempt + 1} attempts: {code}")
                return code

        self.logger.error(f"No free short code after {self.max_attempts} attempts")
        raise GeneratorExhaustedError(
            f"Unable to generate unique short code after {self.max_attempts} attempts"
        )
