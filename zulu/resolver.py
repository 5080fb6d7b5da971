#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
resolver.py - Turn a local wall-clock reading into a UTC instant

The local date and UTC offset come from a Clock so callers (and tests) can
pin "now". When no meridian is given it is taken from the current hour,
even if an explicit time was supplied.
"""

from datetime import datetime
from typing import Optional

from dateutil import tz

from zulu.logger import setup_logger
from zulu.time_parser import ClockTime, Meridian

logger = setup_logger(__name__)


class Clock:
    """Source of the current local date, time and UTC offset"""

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    """Host clock in the host's local zone"""

    def now(self) -> datetime:
        return datetime.now(tz.tzlocal())


class FixedClock(Clock):
    """Clock pinned to one moment; naive moments are read as host-local"""

    def __init__(self, moment: datetime):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=tz.tzlocal())
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


def infer_meridian(now_local: datetime) -> Meridian:
    return Meridian.for_hour(now_local.hour)


def effective_hours(hours: int, meridian: Meridian) -> int:
    """24-hour value after meridian adjustment

    Only a PM hour below 12 moves (by +12). Hours of 12 or more are left
    alone whatever the meridian.
    """
    if hours < 12 and meridian.is_pm:
        return hours + 12
    return hours


def resolve(explicit_time: Optional[ClockTime],
            explicit_meridian: Optional[Meridian],
            now_local: datetime) -> datetime:
    """Resolve a time of day on today's local date to a UTC instant

    Raises ValueError if the adjusted hour or the minute cannot form a
    time of day.
    """
    meridian = explicit_meridian or infer_meridian(now_local)
    time = explicit_time or ClockTime.from_datetime(now_local)
    hours = effective_hours(time.hours, meridian)
    logger.debug(f"Resolving {time} {meridian.value} -> {hours:02d}:{time.minutes:02d} local")

    offset = tz.tzoffset(None, now_local.utcoffset())
    local = datetime(now_local.year, now_local.month, now_local.day,
                     hours, time.minutes, 0, tzinfo=offset)
    zulu = local.astimezone(tz.UTC)
    logger.debug(f"Local {local.isoformat()} is {zulu.isoformat()}")
    return zulu


class ZuluResolver:
    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or SystemClock()

    def resolve(self, explicit_time: Optional[ClockTime] = None,
                explicit_meridian: Optional[Meridian] = None) -> datetime:
        """Resolve against a single reading of the clock"""
        return resolve(explicit_time, explicit_meridian, self.clock.now())
