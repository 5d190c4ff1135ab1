import logging
import secrets
import string
from dataclasses import dataclass

from ..errors import GenerationError

logger = logging.getLogger("nflx_rotate")


LOWER_LETTERS = string.ascii_lowercase
UPPER_LETTERS = string.ascii_uppercase
DIGITS = string.digits

# Every printable ASCII punctuation character.
SYMBOLS_ALL = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"

# Symbols that survive being pasted into a shell command line unquoted
# (no quotes, backticks, ``$``, ``!``, ``=`` or ``~``).
SYMBOLS_SHELL_SAFE = "#%&()*+,-./:;<>?@[\\]^_{|}"


@dataclass(frozen=True)
class PasswordPolicy:
    """Shape of an auto-generated password.

    ``max_len`` is the total length; ``num_digits`` and ``num_symbols`` of it
    are drawn from the digit and symbol alphabets, the rest are letters.
    """
    max_len: int = 16
    num_digits: int = 8
    num_symbols: int = 8
    no_upper: bool = False
    allow_repeat: bool = False
    symbols: str = SYMBOLS_ALL

    @property
    def letters(self) -> str:
        return LOWER_LETTERS if self.no_upper else LOWER_LETTERS + UPPER_LETTERS

    @property
    def num_letters(self) -> int:
        return self.max_len - self.num_digits - self.num_symbols

    def validate(self) -> None:
        """Raise GenerationError if no password can satisfy this policy."""
        if self.max_len <= 0:
            raise GenerationError(f"maximum length must be positive, got {self.max_len}")
        if self.num_digits < 0 or self.num_symbols < 0:
            raise GenerationError("digit and symbol counts must not be negative")
        if self.num_letters < 0:
            raise GenerationError(
                f"number of digits ({self.num_digits}) and symbols ({self.num_symbols}) "
                f"exceeds the total length ({self.max_len})"
            )
        if self.allow_repeat:
            return
        if self.num_letters > len(self.letters):
            raise GenerationError("number of letters exceeds available letters and repeats are not allowed")
        if self.num_digits > len(DIGITS):
            raise GenerationError("number of digits exceeds available digits and repeats are not allowed")
        if self.num_symbols > len(self.symbols):
            raise GenerationError("number of symbols exceeds available symbols and repeats are not allowed")


def _random_insert(result: str, ch: str) -> str:
    pos = secrets.randbelow(len(result) + 1)
    return result[:pos] + ch + result[pos:]


def _draw(result: str, alphabet: str, count: int, allow_repeat: bool) -> str:
    added = 0
    while added < count:
        ch = secrets.choice(alphabet)
        if not allow_repeat and ch in result:
            continue
        result = _random_insert(result, ch)
        added += 1
    return result


def generate_password(policy: PasswordPolicy) -> str:
    """Generate a random password that satisfies ``policy``.

    Letters, digits and symbols are drawn with ``secrets`` and each is
    inserted at a random position. Without ``allow_repeat`` no character
    appears twice.

    Raises:
        GenerationError: If the policy cannot be satisfied.
    """
    policy.validate()

    result = ""
    result = _draw(result, policy.letters, policy.num_letters, policy.allow_repeat)
    result = _draw(result, DIGITS, policy.num_digits, policy.allow_repeat)
    result = _draw(result, policy.symbols, policy.num_symbols, policy.allow_repeat)

    logger.debug(
        f"[generator] generated password of length {len(result)} "
        f"({policy.num_digits} digits, {policy.num_symbols} symbols)"
    )
    return result
