"""Main CLI application."""

import typer
from pydantic import ValidationError

from shortid.cli.commands import audit, ids
from shortid.cli.utils import CLI_LOG_FORMAT, fail
from shortid.default import set_default
from shortid.exceptions import ConfigError
from shortid.generator import Shortid
from shortid.logging import setup_logging
from shortid.settings import get_settings

app = typer.Typer(
    name="shortid",
    help="Generate and inspect short, unique, URL-friendly ids",
    no_args_is_help=True,
)

WORKER_OPTION = typer.Option(
    None,
    "--worker",
    "-w",
    help="Worker id 0..31 (overrides SHORTID_WORKER)",
    metavar="<worker>",
)  # fmt: skip
SEED_OPTION = typer.Option(
    None,
    "--seed",
    "-s",
    help="Alphabet shuffle seed (overrides SHORTID_SEED)",
    metavar="<seed>",
)  # fmt: skip
ALPHABET_OPTION = typer.Option(
    None,
    "--alphabet",
    help="64 unique symbols (overrides SHORTID_ALPHABET)",
    metavar="<symbols>",
)  # fmt: skip
NORMALIZE_OPTION = typer.Option(
    None,
    "--normalize/--no-normalize",
    help="Sort the alphabet before shuffling (overrides SHORTID_NORMALIZE_ALPHABET)",
)  # fmt: skip
LOG_LEVEL_OPTION = typer.Option(
    None,
    "--log-level",
    help="Log level (overrides SHORTID_LOG_LEVEL)",
    metavar="<level>",
    case_sensitive=False,
)  # fmt: skip


@app.callback()
def main_callback(
    worker: int = WORKER_OPTION,
    seed: int = SEED_OPTION,
    alphabet_: str = ALPHABET_OPTION,
    normalize: bool = NORMALIZE_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
):
    """Global options for all commands."""
    overrides = {}
    if worker is not None:
        overrides["worker"] = worker
    if seed is not None:
        overrides["seed"] = seed
    if alphabet_ is not None:
        overrides["alphabet"] = alphabet_
    if normalize is not None:
        overrides["normalize_alphabet"] = normalize

    try:
        # Apply overrides to a copy, the cached settings stay untouched
        settings = get_settings().model_copy(update=overrides)
        setup_logging(log_level or settings.log_level, log_format=CLI_LOG_FORMAT)
        set_default(Shortid.from_settings(settings))
    except ValidationError as e:
        fail(f"Invalid settings: {e}")
    except (ConfigError, ValueError) as e:
        fail(str(e))


app.command()(ids.generate)
app.command()(ids.decode)
app.command()(audit.alphabet)
app.command()(audit.info)
