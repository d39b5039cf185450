"""
Unit tests for AlertManager module.

Tests console output and CSV logging of flagged lines.
"""

import csv
import os

from login_sentry.alert_manager import AlertManager, CSV_HEADER
from login_sentry.models import DetectionResult, RunSummary, Verdict


def make_result(verdict=Verdict.FREQUENCY, line="Jun 10 10:00:18 host sshd[1]: login"):
    return DetectionResult(
        verdict=verdict,
        line=line,
        user="bob",
        ip="192.168.1.20",
        timestamp="Jun 10 10:00:18",
    )


class TestConsoleOutput:

    def test_frequency_message(self, capsys):
        manager = AlertManager()
        manager.send_alert(make_result(Verdict.FREQUENCY, "the line"))
        assert capsys.readouterr().out == "Hacking due to frequency. Line: the line\n"

    def test_banned_ip_message(self, capsys):
        manager = AlertManager()
        manager.send_alert(make_result(Verdict.BANNED_IP, "the line"))
        assert capsys.readouterr().out == "Hacking due to banned IP. Line: the line\n"

    def test_unflagged_result_ignored(self, capsys):
        manager = AlertManager()
        manager.send_alert(make_result(Verdict.NOT_FLAGGED))
        assert capsys.readouterr().out == ""
        assert manager.alerts_sent == 0

    def test_summary_line(self, capsys):
        AlertManager().report_summary(RunSummary(lines=4, hacks=1))
        assert capsys.readouterr().out == "Processed 4 lines. Found 1 possible hacking attempts.\n"


class TestCsvOutput:

    def test_csv_initialized_with_header(self, temp_csv_file):
        AlertManager(csv_output_path=temp_csv_file)

        with open(temp_csv_file, newline='') as f:
            rows = list(csv.reader(f))
        assert rows == [CSV_HEADER]

    def test_creates_parent_directory(self, temp_dir):
        path = os.path.join(temp_dir, "nested", "alerts.csv")
        AlertManager(csv_output_path=path)
        assert os.path.exists(path)

    def test_alert_appended(self, temp_csv_file, capsys):
        manager = AlertManager(csv_output_path=temp_csv_file)
        manager.send_alert(make_result(Verdict.BANNED_IP, "a line, with a comma"))

        with open(temp_csv_file, newline='') as f:
            rows = list(csv.reader(f))
        assert rows[1] == ["Jun 10 10:00:18", "bob", "192.168.1.20", "banned IP", "a line, with a comma"]
        assert manager.alerts_sent == 1

    def test_existing_file_not_truncated(self, temp_csv_file, capsys):
        AlertManager(csv_output_path=temp_csv_file).send_alert(make_result())
        AlertManager(csv_output_path=temp_csv_file).send_alert(make_result())

        with open(temp_csv_file, newline='') as f:
            rows = list(csv.reader(f))
        assert len(rows) == 3
        assert rows[0] == CSV_HEADER

    def test_write_failure_returns_false(self, temp_csv_file):
        manager = AlertManager(csv_output_path=temp_csv_file)
        os.remove(temp_csv_file)
        os.mkdir(temp_csv_file)
        assert manager.log_to_csv(make_result()) == False
