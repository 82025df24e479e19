"""Shuffled alphabet used to render integers as short id symbols.

The alphabet is permuted with the linear congruential generator of The
Central Randomizer 1.3 (C) 1997 by Paul Houle. The permutation is not
cryptographically strong; it must stay bit-for-bit identical so that
generators configured with the same alphabet and seed agree on every symbol.

Encoding packs ``digits`` payload bits into each 6-bit symbol index and fills
the remaining high bits with random bits, so the same value renders
differently on every call while still decoding to the same value.
"""

import random
import secrets
import threading

from loguru import logger

from shortid.exceptions import (
    CapacityError,
    DecodingError,
    EncodingError,
    InvalidAlphabetError,
    InvalidDigitsError,
    InvalidSeedError,
    SymbolIndexError,
)
from shortid.utils.runes import sort_symbols, unique

DEFAULT_ABC = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"
ABC_SIZE = len(DEFAULT_ABC)
SYMBOL_BITS = 6
SYMBOL_MASK = (1 << SYMBOL_BITS) - 1
MIN_DIGITS = 4
MAX_DIGITS = SYMBOL_BITS

_LCG_MULTIPLIER = 9301
_LCG_INCREMENT = 49297
_LCG_MODULUS = 233280


def shuffle(alphabet: str, seed: int) -> str:
    """Permute the alphabet deterministically from the seed.

    Args:
        alphabet: Base symbols in their base order
        seed: Positive starting seed

    Returns:
        The permuted alphabet
    """
    source = list(alphabet)
    shuffled = []
    while len(source) > 1:
        seed = (seed * _LCG_MULTIPLIER + _LCG_INCREMENT) % _LCG_MODULUS
        shuffled.append(source.pop(seed * len(source) // _LCG_MODULUS))
    shuffled.extend(source)
    return "".join(shuffled)


def masked_random_ints(size: int, mask: int) -> list[int]:
    """Return ``size`` random bytes, each masked with ``mask``.

    Falls back to the non-cryptographic ``random`` module if the operating
    system has no usable entropy source.
    """
    try:
        data = secrets.token_bytes(size)
    except (NotImplementedError, OSError) as e:
        logger.warning(f"Secure random source unavailable, using pseudo-random filler: {e}")
        data = bytes(random.getrandbits(8) for _ in range(size))
    return [b & mask for b in data]


def _validate_seed(seed: int) -> None:
    if isinstance(seed, bool) or not isinstance(seed, int) or seed < 1:
        raise InvalidSeedError(seed)


class Abc:
    """A seed-shuffled 64-symbol alphabet with encode and decode primitives."""

    def __init__(self, alphabet: str = DEFAULT_ABC, seed: int = 1, normalize: bool = False):
        """Build the permutation for the given alphabet and seed.

        Args:
            alphabet: 64 unique symbols
            seed: Positive seed driving the permutation
            normalize: Sort the symbols before shuffling so that any ordering of
                the same symbol set yields the same permutation

        Raises:
            InvalidAlphabetError: If the alphabet does not hold exactly 64 unique symbols
            InvalidSeedError: If the seed is not a positive integer
        """
        symbols = unique(alphabet)
        if len(symbols) != ABC_SIZE or len(alphabet) != ABC_SIZE:
            raise InvalidAlphabetError(len(symbols), len(alphabet), ABC_SIZE)
        _validate_seed(seed)

        if normalize:
            symbols = sort_symbols(symbols)
        self._source = "".join(symbols)
        self._start_seed = seed
        self._lock = threading.Lock()
        self._table = self._build_table(seed)

    def _build_table(self, seed: int) -> tuple[str, dict[str, int]]:
        shuffled = shuffle(self._source, seed)
        return shuffled, {symbol: i for i, symbol in enumerate(shuffled)}

    @property
    def alphabet(self) -> str:
        """The permuted alphabet."""
        return self._table[0]

    @property
    def source(self) -> str:
        """The base alphabet the permutation was computed from."""
        return self._source

    @property
    def seed(self) -> int:
        """The seed the current permutation was computed from."""
        return self._start_seed

    def reset(self) -> None:
        """Recompute the permutation from the start seed."""
        with self._lock:
            self._table = self._build_table(self._start_seed)

    def set_seed(self, seed: int) -> None:
        """Replace the start seed and recompute the permutation.

        Raises:
            InvalidSeedError: If the seed is not a positive integer
        """
        _validate_seed(seed)
        with self._lock:
            self._start_seed = seed
            self._table = self._build_table(seed)
        logger.debug(f"Alphabet reshuffled with seed {seed}")

    def lookup(self, index: int) -> str:
        """Return the symbol at ``index`` in the permuted alphabet."""
        if not 0 <= index < ABC_SIZE:
            raise SymbolIndexError(index, ABC_SIZE)
        return self._table[0][index]

    def index_of(self, symbol: str) -> int:
        """Return the position of ``symbol`` in the permuted alphabet."""
        try:
            return self._table[1][symbol]
        except KeyError:
            raise DecodingError(f"Symbol {symbol!r} is not part of the alphabet") from None

    def encode(self, value: int, width: int = 0, digits: int = 5) -> str:
        """Encode a non-negative integer into symbols, least significant first.

        Every symbol carries ``digits`` bits of the value; the remaining
        ``6 - digits`` high bits of its index are random. With ``digits == 6``
        no randomness is used and the encoding is exact.

        Args:
            value: Non-negative integer to encode
            width: Number of symbols to produce, 0 to use as many as required.
                Unused positions encode zero so that appended data stays unique.
            digits: Payload bits per symbol, in [4, 6]

        Returns:
            The encoded symbols

        Raises:
            InvalidDigitsError: If ``digits`` is outside [4, 6]
            CapacityError: If ``width`` is smaller than the value requires
        """
        if not MIN_DIGITS <= digits <= MAX_DIGITS:
            raise InvalidDigitsError(digits, MIN_DIGITS, MAX_DIGITS)
        if value < 0:
            raise EncodingError(f"Cannot encode negative value {value}")

        required = (value.bit_length() - 1) // digits + 1 if value >= 1 else 1
        if width == 0:
            width = required
        elif width < required:
            raise CapacityError(required, width)

        mask = (1 << digits) - 1
        if digits < MAX_DIGITS:
            filler = masked_random_ints(width, SYMBOL_MASK ^ mask)
        else:
            filler = [0] * width

        symbols = self._table[0]
        return "".join(symbols[((value >> (digits * i)) & mask) | filler[i]] for i in range(width))

    def decode(self, symbols: str, digits: int = 5) -> int:
        """Recover the value encoded by :meth:`encode` with the same ``digits``.

        Random filler bits only occupy the high bits of each index, so masking
        them off restores the payload exactly.

        Raises:
            InvalidDigitsError: If ``digits`` is outside [4, 6]
            DecodingError: If ``symbols`` is empty or holds an unknown symbol
        """
        if not MIN_DIGITS <= digits <= MAX_DIGITS:
            raise InvalidDigitsError(digits, MIN_DIGITS, MAX_DIGITS)
        if not symbols:
            raise DecodingError("Nothing to decode")

        mask = (1 << digits) - 1
        value = 0
        for i, symbol in enumerate(symbols):
            value |= (self.index_of(symbol) & mask) << (digits * i)
        return value

    def __str__(self) -> str:
        return f"Abc(alphabet='{self.alphabet}')"

    __repr__ = __str__
