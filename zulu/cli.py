#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Command line entry point: zulu [TIME] [AM_PM] [-t FORMAT]"""

from typing import Optional

import click

from zulu import __version__
from zulu.config import get_testing_mode
from zulu.formatter import format_zulu
from zulu.logger import setup_logger
from zulu.resolver import Clock, ZuluResolver
from zulu.time_parser import (
    ClockTime, Meridian, TimeParseError, MeridianParseError,
    parse_time, parse_meridian,
)

logger = setup_logger('cli', testing=get_testing_mode())


class TimeType(click.ParamType):
    name = 'time'

    def convert(self, value, param, ctx):
        if isinstance(value, ClockTime):
            return value
        try:
            return parse_time(value)
        except TimeParseError as e:
            logger.debug(f"Rejected time {e.token!r}: {e}")
            self.fail(str(e), param, ctx)


class MeridianType(click.ParamType):
    name = 'am_pm'

    def convert(self, value, param, ctx):
        if isinstance(value, Meridian):
            return value
        try:
            return parse_meridian(value)
        except MeridianParseError as e:
            logger.debug(f"Rejected meridian {e.token!r}")
            self.fail(str(e), param, ctx)


def run(time: Optional[ClockTime], am_pm: Optional[Meridian],
        time_format: Optional[str], clock: Optional[Clock] = None) -> str:
    """Resolve and format; returns the line to print"""
    resolver = ZuluResolver(clock)
    try:
        zulu = resolver.resolve(time, am_pm)
    except ValueError as e:
        logger.debug(f"Cannot build time from {time} {am_pm}: {e}")
        raise click.ClickException(f'invalid time of day: {e}') from e
    return format_zulu(zulu, time_format)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("time", type=TimeType(), required=False, metavar="[TIME]")
@click.argument("am_pm", type=MeridianType(), required=False, metavar="[AM_PM]")
@click.option(
    "-t", "--time-format",
    default=None,
    help="optional time format string; applied to output (default %H:%M)",
)
@click.version_option(__version__, prog_name="zulu")
@click.pass_context
def main(ctx: click.Context, time: Optional[ClockTime], am_pm: Optional[Meridian],
         time_format: Optional[str]) -> None:
    """Convert a local TIME (H:MM, optionally AM/PM) to UTC.

    With no TIME the current local time is used. Without AM_PM the
    meridian follows the current hour.
    """
    logger.debug(f"Arguments: time={time} am_pm={am_pm} time_format={time_format!r}")
    clock = ctx.obj if isinstance(ctx.obj, Clock) else None
    click.echo(run(time, am_pm, time_format, clock))


if __name__ == "__main__":  # pragma: no cover
    main()
