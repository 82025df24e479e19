"""Short, unique, URL-friendly ids.

Ids are normally 9 symbols long, unique for 34 years from the epoch for up to
32 workers sharing one alphabet and seed, and grow by a symbol or two only
when many ids are requested within the same millisecond.
"""

from loguru import logger

from .alphabet import DEFAULT_ABC, Abc
from .default import generate, get_default, reset_default, set_default
from .exceptions import (
    CapacityError,
    ConfigError,
    DecodingError,
    EncodingError,
    ExhaustionError,
    InvalidAlphabetError,
    InvalidDigitsError,
    InvalidSeedError,
    InvalidWorkerError,
    ShortidError,
    SymbolIndexError,
)
from .generator import Shortid
from .models import GeneratorInfo, IdParts
from .settings import ShortidSettings, get_settings

logger.disable(__name__)

__all__ = [
    "DEFAULT_ABC",
    "Abc",
    "CapacityError",
    "ConfigError",
    "DecodingError",
    "EncodingError",
    "ExhaustionError",
    "GeneratorInfo",
    "IdParts",
    "InvalidAlphabetError",
    "InvalidDigitsError",
    "InvalidSeedError",
    "InvalidWorkerError",
    "Shortid",
    "ShortidError",
    "ShortidSettings",
    "SymbolIndexError",
    "generate",
    "get_default",
    "get_settings",
    "reset_default",
    "set_default",
]
