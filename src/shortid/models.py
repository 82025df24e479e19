"""Pydantic models describing generators and decoded identifiers."""

from datetime import datetime

from pydantic import BaseModel


class GeneratorInfo(BaseModel):
    """Configuration of a generator, used to audit reproducibility across processes."""

    worker: int
    seed: int
    epoch: datetime
    alphabet: str  # permuted
    source_alphabet: str


class IdParts(BaseModel):
    """Fields recovered from an identifier."""

    bucket: int  # milliseconds since epoch
    worker: int
    counter: int = 0
    issued_at: datetime
