"""Commands for auditing generator configuration across processes."""

from shortid.cli.utils import console
from shortid.default import get_default


def alphabet():
    """Print the shuffled alphabet.

    Processes generating into the same data space must print the same value.
    """
    console.print(get_default().alphabet, highlight=False, markup=False, soft_wrap=True)


def info():
    """Print the generator configuration as JSON."""
    console.print(get_default().info().model_dump_json(indent=2), highlight=False, markup=False, soft_wrap=True)
