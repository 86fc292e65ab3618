"""Tests for the limaclock command line."""

import json

import pytest

from limaclock.clock import FixedClock
from limaclock.main import main


@pytest.fixture(autouse=True)
def no_env_timezone(monkeypatch):
    """Keep the caller's LIMACLOCK_TZ out of the tests."""
    monkeypatch.delenv("LIMACLOCK_TZ", raising=False)


class TestDisplayCommands:
    """Tests for the display-date and display-time subcommands."""

    def test_display_date(self, capsys):
        assert main(["display-date", "2024-03-07"]) == 0
        assert capsys.readouterr().out.strip() == "07/03/2024"

    def test_display_time(self, capsys):
        assert main(["display-time", "14:05:09.123"]) == 0
        assert capsys.readouterr().out.strip() == "14:05:09"


class TestMomentOutput:
    """Tests for the default (no subcommand) output."""

    def test_text(self, capsys, fixed_clock: FixedClock):
        assert main([], clock=fixed_clock) == 0
        out = capsys.readouterr().out
        assert "Timezone: America/Lima" in out
        assert "2024-03-07 (07/03/2024)" in out
        assert "14:05:09" in out
        assert "Weekday:  4" in out

    def test_json(self, capsys, fixed_clock: FixedClock):
        assert main(["--json"], clock=fixed_clock) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["date"] == "2024-03-07"
        assert data["time"] == "14:05:09"
        assert data["weekday"] == 4

    def test_tz_flag(self, capsys, fixed_clock: FixedClock):
        main(["--tz", "Asia/Tokyo", "--json"], clock=fixed_clock)
        assert json.loads(capsys.readouterr().out)["date"] == "2024-03-08"

    def test_env_timezone(self, capsys, monkeypatch, fixed_clock: FixedClock):
        monkeypatch.setenv("LIMACLOCK_TZ", "Asia/Tokyo")
        main(["--json"], clock=fixed_clock)
        assert json.loads(capsys.readouterr().out)["weekday"] == 5

    def test_unknown_timezone_exits(self, capsys, fixed_clock: FixedClock):
        with pytest.raises(SystemExit) as exc_info:
            main(["--tz", "Not/AZone"], clock=fixed_clock)
        assert exc_info.value.code == 2
        assert "unknown timezone" in capsys.readouterr().err

    def test_log_dir(self, tmp_path, fixed_clock: FixedClock):
        log_dir = tmp_path / "logs"
        main(["--log-dir", str(log_dir)], clock=fixed_clock)
        assert (log_dir / "debug.log").exists()
