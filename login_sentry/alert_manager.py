"""
Alert management module for LoginSentry.

Handles reporting of flagged log lines to the console and, optionally, a CSV file.
"""

import csv
import logging
import os
from pathlib import Path
from typing import Optional

from .models import REASONS, DetectionResult, RunSummary

logger = logging.getLogger(__name__)

CSV_HEADER = ['timestamp', 'user', 'source_ip', 'reason', 'line']


class AlertManager:
    """
    Reports detection results.

    Flagged lines always go to standard output; a CSV alert log is kept
    in addition when ``csv_output_path`` is given.
    """

    def __init__(self, csv_output_path: Optional[str] = None):
        """
        Initialize AlertManager with an optional CSV output.

        Args:
            csv_output_path: Path to CSV file for alert logging
        """
        self.csv_output_path = csv_output_path
        self.alerts_sent = 0

        if self.csv_output_path:
            self._initialize_csv()

        logger.info(f"CSV alert output: {csv_output_path or 'Disabled'}")

    def _initialize_csv(self) -> None:
        """
        Create CSV file with headers if it doesn't exist or is empty.
        """
        csv_dir = os.path.dirname(self.csv_output_path)
        if csv_dir:
            Path(csv_dir).mkdir(parents=True, exist_ok=True)

        file_has_content = (
            os.path.exists(self.csv_output_path)
            and os.path.getsize(self.csv_output_path) > 0
        )
        if not file_has_content:
            with open(self.csv_output_path, 'w', newline='') as csvfile:
                csv.writer(csvfile).writerow(CSV_HEADER)
            logger.info(f"CSV file initialized: {self.csv_output_path}")

    def send_alert(self, result: DetectionResult) -> None:
        """
        Report a flagged line to all configured outputs.

        Args:
            result: detection outcome; unflagged results are ignored
        """
        if not result.flagged:
            return

        print(result.message)
        self.alerts_sent += 1

        if self.csv_output_path:
            self.log_to_csv(result)

    def log_to_csv(self, result: DetectionResult) -> bool:
        """
        Append an alert row to the CSV file.

        Returns:
            bool: True if successful, False otherwise
        """
        try:
            with open(self.csv_output_path, 'a', newline='') as csvfile:
                csv.writer(csvfile).writerow([
                    result.timestamp,
                    result.user,
                    result.ip,
                    REASONS[result.verdict],
                    result.line,
                ])
            return True
        except OSError as e:
            logger.error(f"Error writing to CSV: {e}")
            return False

    def report_summary(self, summary: RunSummary) -> None:
        print(summary.message)
        if summary.skipped_timestamps:
            logger.warning(
                f"{summary.skipped_timestamps} line(s) had unparseable timestamps "
                "and were not tracked for login frequency"
            )
