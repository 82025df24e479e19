"""Short id generator.

An identifier is laid out as three blocks of symbols from the shuffled
alphabet, in this order:

- 8 symbols: milliseconds since the epoch, 5 payload bits per symbol (40 bits,
  about 34 years), 1 random bit per symbol
- 1 symbol: the worker id (0..31), 5 payload bits and 1 random bit
- 0 or more symbols: the number of ids already issued within the same
  millisecond, 6 bits per symbol and no randomness

Ids issued at different milliseconds are therefore 9 symbols long; the
counter block only appears under contention (1 extra symbol up to 63
requests within one millisecond, 2 up to 4095).
"""

import threading
from datetime import datetime, timedelta

import arrow
from loguru import logger

from shortid.alphabet import DEFAULT_ABC, Abc
from shortid.exceptions import DecodingError, ExhaustionError, InvalidWorkerError
from shortid.models import GeneratorInfo, IdParts
from shortid.settings import ShortidSettings

DEFAULT_EPOCH = arrow.get(2016, 1, 1)

BUCKET_WIDTH = 8
BUCKET_DIGITS = 5
MAX_BUCKET = (1 << (BUCKET_WIDTH * BUCKET_DIGITS)) - 1
WORKER_WIDTH = 1
WORKER_DIGITS = 5
MAX_WORKER = (1 << (WORKER_WIDTH * WORKER_DIGITS)) - 1
COUNTER_DIGITS = 6
BASE_LENGTH = BUCKET_WIDTH + WORKER_WIDTH

_BUCKET_UNIT = timedelta(milliseconds=1)

TimeLike = datetime | arrow.Arrow | str


class Shortid:
    """Generates short, unique ids for one worker.

    Safe to share between threads: the time bucket and the same-bucket
    counter are advanced together under a single lock.
    """

    def __init__(
        self,
        worker: int = 0,
        alphabet: str = DEFAULT_ABC,
        seed: int = 1,
        epoch: TimeLike | None = None,
        normalize_alphabet: bool = False,
    ):
        """Create a generator.

        Args:
            worker: Worker id in [0, 31], unique per process sharing the alphabet and seed
            alphabet: 64 unique symbols
            seed: Positive seed used to shuffle the alphabet, identical across workers
            epoch: Start of millisecond counting, defaults to 2016-01-01 UTC.
                Naive datetimes are taken as UTC.
            normalize_alphabet: Sort the alphabet before shuffling

        Raises:
            InvalidWorkerError: If the worker is out of range
            InvalidAlphabetError: If the alphabet is not 64 unique symbols
            InvalidSeedError: If the seed is not positive
        """
        if isinstance(worker, bool) or not isinstance(worker, int) or not 0 <= worker <= MAX_WORKER:
            raise InvalidWorkerError(worker, MAX_WORKER)

        self._abc = Abc(alphabet, seed, normalize=normalize_alphabet)
        self._worker = worker
        self._epoch = DEFAULT_EPOCH if epoch is None else arrow.get(epoch)
        self._last_bucket = -1
        self._count = 0
        self._lock = threading.Lock()

        logger.debug(f"New {self}")

    @classmethod
    def from_settings(cls, settings: ShortidSettings) -> "Shortid":
        """Create a generator from settings."""
        return cls(
            worker=settings.worker,
            alphabet=settings.alphabet,
            seed=settings.seed,
            epoch=settings.epoch,
            normalize_alphabet=settings.normalize_alphabet,
        )

    @property
    def abc(self) -> Abc:
        """The shuffled alphabet used to render ids."""
        return self._abc

    @property
    def alphabet(self) -> str:
        return self._abc.alphabet

    @property
    def seed(self) -> int:
        return self._abc.seed

    @property
    def epoch(self) -> arrow.Arrow:
        """Beginning of millisecond counting."""
        return self._epoch

    @property
    def worker(self) -> int:
        return self._worker

    def generate(self, now: TimeLike | None = None) -> str:
        """Generate a new id.

        Args:
            now: Point in time to generate the id for, defaults to the current time

        Returns:
            The id, 9 symbols long unless several ids share one millisecond

        Raises:
            ExhaustionError: If ``now`` is before the epoch or more than about
                34 years after it
        """
        now = arrow.utcnow() if now is None else arrow.get(now)
        bucket = (now - self._epoch) // _BUCKET_UNIT
        if not 0 <= bucket <= MAX_BUCKET:
            raise ExhaustionError(bucket, MAX_BUCKET)

        bucket, count, regressed_from = self._next_bucket_and_count(bucket)
        if regressed_from is not None:
            logger.warning(f"Clock moved backwards from bucket {bucket} to {regressed_from}, reusing last bucket")

        parts = [
            self._abc.encode(bucket, BUCKET_WIDTH, BUCKET_DIGITS),
            self._abc.encode(self._worker, WORKER_WIDTH, WORKER_DIGITS),
        ]
        if count > 0:
            parts.append(self._abc.encode(count, 0, COUNTER_DIGITS))
        return "".join(parts)

    def _next_bucket_and_count(self, bucket: int) -> tuple[int, int, int | None]:
        """Advance the bucket/counter state and return the pair to encode.

        A bucket older than the last one is clamped to the last one, so a
        clock step backwards keeps counting instead of reissuing old pairs.
        The third element is the observed bucket when that happened.
        """
        regressed_from = None
        with self._lock:
            if bucket < self._last_bucket:
                regressed_from = bucket
                bucket = self._last_bucket
            if bucket == self._last_bucket:
                self._count += 1
            else:
                self._count = 0
                self._last_bucket = bucket
            return self._last_bucket, self._count, regressed_from

    def decode(self, identifier: str) -> IdParts:
        """Recover the time bucket, worker and counter from an id.

        Raises:
            DecodingError: If the id is too short or holds unknown symbols
        """
        if len(identifier) < BASE_LENGTH:
            raise DecodingError(f"Id {identifier!r} is shorter than {BASE_LENGTH} symbols")

        bucket = self._abc.decode(identifier[:BUCKET_WIDTH], BUCKET_DIGITS)
        worker = self._abc.decode(identifier[BUCKET_WIDTH:BASE_LENGTH], WORKER_DIGITS)
        counter_block = identifier[BASE_LENGTH:]
        counter = self._abc.decode(counter_block, COUNTER_DIGITS) if counter_block else 0
        return IdParts(
            bucket=bucket,
            worker=worker,
            counter=counter,
            issued_at=(self._epoch + bucket * _BUCKET_UNIT).datetime,
        )

    def info(self) -> GeneratorInfo:
        """Describe the configuration of this generator."""
        return GeneratorInfo(
            worker=self._worker,
            seed=self._abc.seed,
            epoch=self._epoch.datetime,
            alphabet=self._abc.alphabet,
            source_alphabet=self._abc.source,
        )

    def __str__(self) -> str:
        return f"Shortid(worker={self._worker}, epoch={self._epoch.isoformat()}, abc={self._abc})"

    __repr__ = __str__
