"""CLI entry point for subtrack."""

import logging

import click
from pydantic import ValidationError

from .config import Config
from .cuesheet import load_cue_sheet
from .errors import SubtrackError
from .srt import format_timestamp, parse_timestamp, write_srt
from .track import EntryTrack


def _setup_logging(level: str) -> None:
    level_value = logging.getLevelName(level)
    if not isinstance(level_value, int):
        level_value = logging.WARNING
    logging.basicConfig(
        level=level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_track(path: str, config: Config) -> EntryTrack:
    try:
        return load_cue_sheet(path, encoding=config.encoding).to_track()
    except ValidationError as e:
        raise click.ClickException(f"Invalid cue sheet {path}:\n{e}") from e
    except SubtrackError as e:
        raise click.ClickException(f"Invalid cue in {path}: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise click.ClickException(f"Cannot read cue sheet {path}: {e}") from e


def _parse_time(value: str) -> int:
    try:
        if value.isascii() and value.isdigit():
            return int(value)
        return parse_timestamp(value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--at") from e


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Build SubRip subtitles from JSON cue sheets.

    \b
    Examples:
      subtrack render cues.json -o movie.srt
      subtrack active cues.json --at 00:01:02,500
      subtrack info cues.json
    """
    config = Config.from_env()
    _setup_logging(config.log_level)
    ctx.obj = config


@main.command()
@click.argument("cuesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output SRT file path (default: print to stdout)",
)
@click.pass_obj
def render(config: Config, cuesheet: str, output: str | None) -> None:
    """Render CUESHEET as SRT."""
    track = _load_track(cuesheet, config)

    if output is None:
        click.echo(track.render(), nl=False)
        return

    path = write_srt(track, output, encoding=config.encoding, newline=config.newline)
    click.echo(f"Wrote {len(track)} cues to {path}")


@main.command()
@click.argument("cuesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--at",
    "at",
    required=True,
    help="Playback time in milliseconds or as HH:MM:SS,mmm",
)
@click.pass_obj
def active(config: Config, cuesheet: str, at: str) -> None:
    """Show the cue in CUESHEET that is on screen at a given time."""
    time_ms = _parse_time(at)
    track = _load_track(cuesheet, config)

    index = track.index_at(time_ms)
    if index is None:
        click.echo(f"No active cue at {format_timestamp(time_ms)}")
        return

    entry = track[index]
    click.echo(
        f"#{index + 1} {format_timestamp(entry.start_ms)} --> {format_timestamp(entry.end_ms)}"
    )
    click.echo(entry.text)


@main.command()
@click.argument("cuesheet", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def info(config: Config, cuesheet: str) -> None:
    """Summarize CUESHEET."""
    track = _load_track(cuesheet, config)
    click.echo(f"Cues: {len(track)}")
    click.echo(f"Ends at: {format_timestamp(track.total_duration())}")


if __name__ == "__main__":
    main()
