import logging

import click

import operations
from config import (
    DEFAULT_LOG_LEVEL,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL_ENVVAR,
    MAX_QUANTIZE_LEVEL,
    MIN_QUANTIZE_LEVEL,
)
from errors import BitmapError
from operations import Command
from transforms import Channel, parse_channel

logger = logging.getLogger(__name__)

MENU_TEXT = """MENU
1 . Save Copy of Image
2 . Remove Image Channel
3 . Invert Image Colours
4 . Quantize Image
5 . Flip Image Horizontally
-1 . Exit"""

CHANNEL_MENU_TEXT = """Enter the channel to remove:
1.Red
2.Green
3.Blue"""

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def done_message(command, channel=None, level=None):
    if command is Command.COPY:
        return "Image Copied"
    if command is Command.REMOVE_CHANNEL:
        return f"{channel.label} channel removed"
    if command is Command.INVERT:
        return "Image Inverted"
    if command is Command.QUANTIZE:
        return f"Image quantized by a level of {level}"
    return "Image Flipped Horizontally"


def run_and_report(command, base_path, channel=None, level=None):
    # raises BitmapError, callers decide how to report it
    saved = operations.run_command(command, base_path, channel=channel, level=level)
    click.echo(done_message(command, channel, level))
    click.echo(f"Image Saved: {saved}")
    return saved


def run_one_shot(command, base_path, channel=None, level=None):
    try:
        run_and_report(command, base_path, channel, level)
    except BitmapError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("--log-level", envvar=LOG_LEVEL_ENVVAR, default=DEFAULT_LOG_LEVEL,
              show_default=True, type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Logging verbosity.")
def cli(log_level):
    """Copy, recolour or flip uncompressed 24-bit bitmap images.

    BASE is the image name without the ".bmp" extension; results are written
    next to it under a descriptive suffix.
    """
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


@cli.command()
@click.argument("base")
def copy(base):
    """Save a copy of BASE."""
    run_one_shot(Command.COPY, base)


@cli.command("remove-channel")
@click.argument("base")
@click.option("--channel", "-c", required=True,
              type=click.Choice([c.label for c in Channel], case_sensitive=False),
              help="Channel to set to zero.")
def remove_channel(base, channel):
    """Zero the red, green or blue channel of BASE."""
    run_one_shot(Command.REMOVE_CHANNEL, base, channel=parse_channel(channel))


@cli.command()
@click.argument("base")
def invert(base):
    """Invert every colour of BASE."""
    run_one_shot(Command.INVERT, base)


@cli.command()
@click.argument("base")
@click.option("--level", "-l", required=True,
              type=click.IntRange(MIN_QUANTIZE_LEVEL, MAX_QUANTIZE_LEVEL),
              help="Number of low-order bits cleared per channel.")
def quantize(base, level):
    """Reduce the number of colours in BASE."""
    run_one_shot(Command.QUANTIZE, base, level=level)


@cli.command()
@click.argument("base")
def flip(base):
    """Flip BASE horizontally."""
    run_one_shot(Command.FLIP_HORIZONTAL, base)


@cli.command()
def menu():
    """Interactive menu, repeats until -1 is entered."""
    while True:
        click.echo(MENU_TEXT)
        choice = click.prompt("Choice", type=int)
        if choice == Command.EXIT:
            break
        try:
            command = Command(choice)
        except ValueError:
            # unknown numbers just show the menu again
            continue

        base_path = click.prompt("Enter the file name of the image to load", type=str)
        channel = level = None
        if command is Command.REMOVE_CHANNEL:
            click.echo(CHANNEL_MENU_TEXT)
            channel = Channel(click.prompt("Channel", type=click.IntRange(1, 3)))
        elif command is Command.QUANTIZE:
            level = click.prompt(
                f"Enter the quantization level ({MIN_QUANTIZE_LEVEL} to {MAX_QUANTIZE_LEVEL})",
                type=click.IntRange(MIN_QUANTIZE_LEVEL, MAX_QUANTIZE_LEVEL))

        try:
            run_and_report(command, base_path, channel, level)
        except BitmapError as exc:
            logger.debug("Menu operation %s failed", command.name)
            click.echo(f"Error: {exc}", err=True)
        click.echo()


if __name__ == "__main__":
    cli()
