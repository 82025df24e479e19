"""Id generation and decoding commands."""

import typer
from rich.table import Table

from shortid.cli.utils import console, fail
from shortid.default import get_default
from shortid.exceptions import DecodingError, ExhaustionError


def generate(
    count: int = typer.Option(
        1,
        "--count",
        "-n",
        min=1,
        help="Number of ids to generate",
    ),
):
    """Generate ids with the configured worker, alphabet and seed.

    Examples:
        shortid generate
        shortid --worker 3 generate -n 100
    """
    sid = get_default()
    try:
        for _ in range(count):
            console.print(sid.generate(), highlight=False, markup=False, soft_wrap=True)
    except ExhaustionError as e:
        fail(f"{e}. Reconfigure the epoch.")


def decode(
    identifiers: list[str] = typer.Argument(..., help="Ids to decode"),
):
    """Show the time bucket, worker and counter encoded in ids.

    Decoding only works with the alphabet and seed the ids were generated with.

    Examples:
        shortid decode gzmZM7VIN
        shortid --seed 42 decode <id> <id>
    """
    sid = get_default()

    table = Table(title="Decoded ids")
    table.add_column("Id", style="cyan")
    table.add_column("Issued at (UTC)")
    table.add_column("Bucket (ms)", justify="right")
    table.add_column("Worker", justify="right")
    table.add_column("Counter", justify="right")

    for identifier in identifiers:
        try:
            parts = sid.decode(identifier)
        except DecodingError as e:
            fail(str(e))
        table.add_row(
            identifier,
            parts.issued_at.isoformat(timespec="milliseconds"),
            str(parts.bucket),
            str(parts.worker),
            str(parts.counter),
        )

    console.print(table)
