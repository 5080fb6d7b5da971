import unittest
from datetime import datetime

from click.testing import CliRunner
from dateutil import tz

from zulu import __version__
from zulu.cli import main, run
from zulu.formatter import format_zulu
from zulu.resolver import FixedClock
from zulu.time_parser import ClockTime, Meridian

EST = tz.tzoffset('EST', -5 * 3600)


class TestFormatZulu(unittest.TestCase):
    def test_default_format(self):
        instant = datetime(2024, 3, 10, 21, 15, tzinfo=tz.UTC)
        self.assertEqual(format_zulu(instant), "21:15")

    def test_custom_format(self):
        instant = datetime(2024, 3, 10, 9, 5, tzinfo=tz.UTC)
        test_cases = [
            ("%H-%M", "09-05"),
            ("%Y-%m-%dT%H:%MZ", "2024-03-10T09:05Z"),
            ("%I:%M %p", "09:05 AM"),
            ("", ""),
        ]

        for time_format, expected in test_cases:
            with self.subTest(time_format=time_format):
                self.assertEqual(format_zulu(instant, time_format), expected)


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.clock = FixedClock(datetime(2024, 3, 10, 14, 30, 45, tzinfo=EST))

    def invoke(self, args):
        return self.runner.invoke(main, args, obj=self.clock)

    def test_conversions(self):
        """Test printed UTC time for common invocations"""
        test_cases = [
            ([], "19:30"),
            (["9:15"], "02:15"),
            (["9:15", "PM"], "02:15"),
            (["9:15", "am"], "14:15"),
            (["21:15", "AM"], "02:15"),
            (["12:00", "pm"], "17:00"),
        ]

        for args, expected in test_cases:
            with self.subTest(args=args):
                result = self.invoke(args)
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertEqual(result.output, f"{expected}\n")

    def test_time_format_option(self):
        clock = FixedClock(datetime(2024, 3, 10, 9, 5, tzinfo=tz.UTC))
        for flag in ["-t", "--time-format"]:
            with self.subTest(flag=flag):
                result = self.runner.invoke(main, ["9:05", "AM", flag, "%H-%M"], obj=clock)
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertEqual(result.output, "09-05\n")

    def test_bad_time(self):
        """Test malformed times exit with a usage error naming the problem"""
        test_cases = [
            ("9", "missing minutes"),
            ("9:15:00", "bad time format"),
            ("x:15", "unable to parse hours: invalid digit found in string"),
            ("9:xx", "unable to parse minutes: invalid digit found in string"),
        ]

        for token, message in test_cases:
            with self.subTest(token=token):
                result = self.invoke([token])
                self.assertEqual(result.exit_code, 2)
                self.assertIn(message, result.output)

    def test_first_positional_is_always_time(self):
        result = self.invoke(["PM"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("unable to parse hours", result.output)

    def test_bad_meridian(self):
        result = self.invoke(["9:15", "Pm"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("unknown am/pm marker: Pm", result.output)

    def test_extra_argument(self):
        result = self.invoke(["9:15", "PM", "extra"])
        self.assertEqual(result.exit_code, 2)

    def test_unknown_option(self):
        result = self.invoke(["--zone", "UTC"])
        self.assertEqual(result.exit_code, 2)

    def test_hour_out_of_range(self):
        """Test a parsed hour past 23 fails while building the time"""
        result = self.invoke(["25:00"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("invalid time of day", result.output)

    def test_version(self):
        result = self.invoke(["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)

    def test_help(self):
        result = self.invoke(["-h"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("--time-format", result.output)

    def test_run(self):
        self.assertEqual(run(ClockTime(9, 15), Meridian.PM, "%H:%M", self.clock), "02:15")

if __name__ == '__main__':
    unittest.main()
