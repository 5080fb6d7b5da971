#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
time_parser.py - Parse the TIME and AM/PM tokens given on the command line

A time token is "H:MM" or "HH:MM". Each field must be a plain unsigned
number no larger than 255; the hour is not checked against a 12 or 24 hour
clock here. The meridian token is one of AM, am, PM or pm.
"""

import enum
from dataclasses import dataclass
from datetime import datetime

from zulu import TIME_SEPARATOR, FIELD_MAX, MERIDIAN_TOKENS
from zulu.logger import setup_logger

logger = setup_logger(__name__)

# Reasons a single numeric field fails to parse
EMPTY_FIELD = 'cannot parse integer from empty string'
INVALID_DIGIT = 'invalid digit found in string'
TOO_LARGE = 'number too large to fit in target type'


class ZuluError(ValueError):
    """Base class for zulu input errors"""


class TimeParseError(ZuluError):
    """A time token could not be split into hours and minutes"""

    MISSING_HOURS = 'missing_hours'
    MISSING_MINUTES = 'missing_minutes'
    BAD_HOURS = 'bad_hours'
    BAD_MINUTES = 'bad_minutes'
    BAD_FORMAT = 'bad_format'

    def __init__(self, kind: str, token: str, detail: str = ''):
        self.kind = kind
        self.token = token
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.kind == self.MISSING_HOURS:
            return 'missing hours'
        if self.kind == self.MISSING_MINUTES:
            return 'missing minutes'
        if self.kind == self.BAD_HOURS:
            return f'unable to parse hours: {self.detail}'
        if self.kind == self.BAD_MINUTES:
            return f'unable to parse minutes: {self.detail}'
        return 'bad time format'

    def __str__(self):
        return self.message


class MeridianParseError(ZuluError):
    """The am/pm token is not one of the accepted literals"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f'unknown am/pm marker: {token}')


class Meridian(enum.Enum):
    AM = 'AM'
    PM = 'PM'

    @property
    def is_pm(self) -> bool:
        return self is Meridian.PM

    @classmethod
    def for_hour(cls, hour: int) -> 'Meridian':
        """AM before noon, PM from noon on"""
        return cls.AM if hour < 12 else cls.PM


@dataclass(frozen=True)
class ClockTime:
    hours: int
    minutes: int

    @classmethod
    def from_datetime(cls, moment: datetime) -> 'ClockTime':
        """Read the 12-hour clock hour (1-12) and minute off a datetime"""
        hours = moment.hour % 12 or 12
        return cls(hours=hours, minutes=moment.minute)

    def __str__(self):
        return f'{self.hours}:{self.minutes:02d}'


def _parse_field(text: str) -> int:
    """Parse one unsigned field, returning the failure reason on error"""
    if not text:
        raise ValueError(EMPTY_FIELD)
    digits = text[1:] if text.startswith('+') else text
    if not digits or not all('0' <= c <= '9' for c in digits):
        raise ValueError(INVALID_DIGIT)
    value = int(digits)
    if value > FIELD_MAX:
        raise ValueError(TOO_LARGE)
    return value


def parse_time(token: str) -> ClockTime:
    """Parse "H:MM" / "HH:MM" into a ClockTime"""
    logger.debug(f"Parsing time token: {token!r}")
    if not token:
        raise TimeParseError(TimeParseError.MISSING_HOURS, token)

    parts = token.split(TIME_SEPARATOR)

    try:
        hours = _parse_field(parts[0])
    except ValueError as e:
        raise TimeParseError(TimeParseError.BAD_HOURS, token, str(e)) from None

    if len(parts) < 2:
        raise TimeParseError(TimeParseError.MISSING_MINUTES, token)

    try:
        minutes = _parse_field(parts[1])
    except ValueError as e:
        raise TimeParseError(TimeParseError.BAD_MINUTES, token, str(e)) from None

    if len(parts) > 2:
        raise TimeParseError(TimeParseError.BAD_FORMAT, token)

    return ClockTime(hours=hours, minutes=minutes)


def parse_meridian(token: str) -> Meridian:
    """Parse AM/am/PM/pm; mixed case is rejected"""
    try:
        return Meridian(MERIDIAN_TOKENS[token])
    except KeyError:
        raise MeridianParseError(token) from None
