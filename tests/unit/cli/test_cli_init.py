"""Tests for monthcal/cli/__init__.py.

Covers the main entry point: default month selection, explicit months,
highlighting, the today report, and error exit codes.
"""

from datetime import date
from unittest.mock import patch

import pytest

from monthcal.cli import format_day_info, main_entry
from monthcal.config.settings import get_settings

TODAY = date(2024, 1, 15)


@pytest.fixture
def mock_today():
    """Pin the host clock used by the CLI."""
    with patch("monthcal.cli.get_today", return_value=TODAY) as mock:
        yield mock


@pytest.mark.usefixtures("mock_today")
class TestMainEntry:
    """Test the main_entry function."""

    def test_defaults_to_current_month(self, capsys):
        """Test no arguments renders today's month with today highlighted."""
        exit_code = main_entry([])

        out = capsys.readouterr().out
        lines = out.splitlines()
        assert exit_code == 0
        assert lines[1] == "|          January,  2024          |"
        assert "| 14 |[15]| 16 | 17 | 18 | 19 | 20 |" in lines
        assert out.endswith("+----+----+----+----+----+----+----+\n")

    def test_explicit_month_and_year(self, capsys):
        """Test -y/-m select another month without highlighting."""
        exit_code = main_entry(["-y2024", "-m2"])

        lines = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert lines[1].strip("|").strip() == "February,  2024"
        assert lines[-2] == "| 25 | 26 | 27 | 28 | 29 |    |    |"
        assert not any("[" in line for line in lines)

    def test_month_only_uses_current_year(self, capsys):
        """Test omitted year defaults to today's year."""
        main_entry(["--month", "3"])

        assert "March,  2024" in capsys.readouterr().out

    def test_year_only_uses_current_month(self, capsys):
        """Test omitted month defaults to today's month; no highlight in another year."""
        main_entry(["--year", "2023"])

        out = capsys.readouterr().out
        assert "January,  2023" in out
        assert "[" not in out

    def test_no_highlight(self, capsys):
        """Test --no-highlight leaves today's cell plain."""
        main_entry(["--no-highlight"])

        out = capsys.readouterr().out
        assert "| 15 |" in out
        assert "[" not in out
        assert get_settings().highlight_today is True

    def test_every_line_is_36_wide(self, capsys):
        """Test printed lines keep the fixed width."""
        main_entry(["-y2024", "-m6"])

        assert all(len(line) == 36 for line in capsys.readouterr().out.splitlines())

    @pytest.mark.parametrize("month", ["0", "13"])
    def test_invalid_month_exits_1_without_output(self, month, capsys):
        """Test invalid months print an error and nothing on stdout."""
        exit_code = main_entry(["-m", month])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "monthcal: error: Invalid date" in captured.err

    def test_invalid_year_exits_1(self, capsys):
        """Test unrepresentable years fail the same way."""
        exit_code = main_entry(["-y10000"])

        assert exit_code == 1
        assert capsys.readouterr().out == ""

    def test_non_integer_argument_exits_2(self, capsys):
        """Test argparse usage errors for non-integer input."""
        with pytest.raises(SystemExit) as exc_info:
            main_entry(["-yabc"])

        assert exc_info.value.code == 2
        assert capsys.readouterr().out == ""

    def test_help_exits_0_without_calendar(self, capsys):
        """Test --help prints usage only."""
        with pytest.raises(SystemExit) as exc_info:
            main_entry(["--help"])

        assert exc_info.value.code == 0
        assert "+----" not in capsys.readouterr().out

    def test_today_info(self, capsys):
        """Test --today-info prints the day report instead of a calendar."""
        exit_code = main_entry(["--today-info"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.splitlines() == format_day_info(TODAY)
        assert "+----" not in out

    def test_bad_configured_log_level_exits_1(self, capsys):
        """Test configuration errors are reported, not raised."""
        with patch.dict("os.environ", {"MONTHCAL_LOGGING__CONSOLE_LEVEL": "LOUD"}):
            exit_code = main_entry([])

        assert exit_code == 1
        assert "Unknown log level" in capsys.readouterr().err

    def test_overrides_do_not_leak_between_runs(self, capsys):
        """Test flags from one run do not affect the next run in the same process."""
        main_entry(["--no-highlight", "--quiet"])
        capsys.readouterr()

        main_entry([])

        assert "|[15]|" in capsys.readouterr().out
        assert get_settings().logging.console_level == "WARNING"

    def test_unusable_log_dir_exits_1(self, tmp_path, capsys):
        """Test a log directory under a regular file is reported, not raised."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x", encoding="utf-8")

        exit_code = main_entry(["--log-dir", str(blocker / "logs")])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "monthcal: error: Cannot write log files to" in captured.err

    def test_quoted_yaml_values_are_coerced(self, config_dir, tmp_path, capsys):
        """Test string-typed YAML values are validated before use."""
        (config_dir / "config.yaml").write_text(
            "highlight_today: \"false\"\n"
            "logging:\n"
            "  file_enabled: true\n"
            f"  file_directory: {tmp_path / 'logs'}\n"
            "  max_log_files: \"3\"\n",
            encoding="utf-8",
        )

        exit_code = main_entry([])

        assert exit_code == 0
        assert "[" not in capsys.readouterr().out

    def test_today_captured_once(self, mock_today, capsys):
        """Test the clock is read a single time per run."""
        main_entry([])

        assert mock_today.call_count == 1


class TestFormatDayInfo:
    """Test the today report."""

    def test_report_lines(self):
        """Test report content for 15 January 2024."""
        assert format_day_info(TODAY) == [
            "Today is Monday, January 15, 2024",
            "\tDay of the week: 1",
            "\tDay of the year: 15",
            "\tDays in this month: 31",
            "\tFirst day of the month: Monday",
        ]
