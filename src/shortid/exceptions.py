"""Exceptions raised by the short id generator.

Two families matter to callers: ``ConfigError`` means the generator or
alphabet was set up wrongly and retrying will not help, ``ExhaustionError``
means the clock has run past what the fixed-width time block can hold and
the epoch must be moved. ``EncodingError`` covers the lower-level encode
and decode failures of the alphabet.
"""


class ShortidError(Exception):
    """Base class for all short id errors."""


class ConfigError(ShortidError):
    """Raised when the alphabet, seed, worker or digit width is invalid."""


class EncodingError(ShortidError):
    """Raised when a value cannot be encoded into or decoded from symbols."""


class InvalidAlphabetError(ConfigError):
    """Raised when a custom alphabet does not hold exactly the required unique symbols."""

    def __init__(self, found: int, length: int, expected: int):
        self.found = found
        self.length = length
        self.expected = expected
        super().__init__(f"Alphabet must contain {expected} unique characters, found {found} unique in {length}")


class InvalidSeedError(ConfigError):
    """Raised when the shuffle seed is not a positive integer."""

    def __init__(self, seed: object):
        self.seed = seed
        super().__init__(f"Seed must be a positive integer, got {seed!r}")


class InvalidWorkerError(ConfigError):
    """Raised when the worker id is outside the supported range."""

    def __init__(self, worker: object, max_worker: int):
        self.worker = worker
        self.max_worker = max_worker
        super().__init__(f"Worker must be in range [0, {max_worker}], got {worker!r}")


class InvalidDigitsError(ConfigError, EncodingError):
    """Raised when the number of payload bits per symbol is outside [4, 6]."""

    def __init__(self, digits: int, min_digits: int, max_digits: int):
        self.digits = digits
        super().__init__(f"Allowed digits range [{min_digits}, {max_digits}], found {digits}")


class CapacityError(EncodingError):
    """Raised when an explicit width is too small for the value to encode."""

    def __init__(self, required: int, width: int):
        self.required = required
        self.width = width
        super().__init__(f"Cannot accommodate data, need {required} symbols, got {width}")


class SymbolIndexError(EncodingError, IndexError):
    """Raised on lookup of a position outside the alphabet."""

    def __init__(self, index: int, size: int):
        self.index = index
        super().__init__(f"Symbol index {index} out of range [0, {size - 1}]")


class DecodingError(EncodingError):
    """Raised when symbols cannot be mapped back to a value."""


class ExhaustionError(ShortidError):
    """Raised when the time bucket does not fit the fixed-width time block.

    The generator can only represent a bounded number of milliseconds after
    its epoch; past that (or before the epoch) it must be reconfigured.
    """

    def __init__(self, bucket: int, max_bucket: int):
        self.bucket = bucket
        self.max_bucket = max_bucket
        super().__init__(f"Time bucket {bucket} outside representable range [0, {max_bucket}]")
