#!/usr/bin/env python3
"""
Unit tests for upload progress reporting in client/files/progress.py

Tests how progress notifications reach the display:
- Size-bounded percentage updates
- Completion forcing when the transport reports everything sent
- Zero-byte files
- Console display logging
"""

import unittest
from unittest.mock import patch

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from client.files.progress import ProgressDisplay, ProgressTracker, ConsoleProgressDisplay
from common.protocol_definitions import ProgressEvent


class RecordingDisplay(ProgressDisplay):
    """Display that remembers every write."""

    def __init__(self):
        self.widths = []
        self.labels = []

    def set_width(self, percent: int):
        self.widths.append(percent)

    def set_label(self, text: str):
        self.labels.append(text)


class TestProgressTracker(unittest.TestCase):
    """Test cases for ProgressTracker."""

    def setUp(self):
        self.display = RecordingDisplay()

    def test_size_bounded_updates_are_monotonic(self):
        """Test that each update shows round(loaded / size * 100)."""
        tracker = ProgressTracker(self.display, file_size=1000)
        for loaded in range(0, 1001, 125):
            tracker.on_progress(ProgressEvent(loaded=loaded, total=1200))

        self.assertEqual(self.display.widths, [0, 13, 25, 38, 50, 63, 75, 88, 100])
        self.assertEqual(self.display.widths, sorted(self.display.widths))
        self.assertEqual(self.display.labels, [f"{w}%" for w in self.display.widths])

    def test_overhead_beyond_file_size_is_not_shown(self):
        """Test that loaded values above the file size skip the ratio update."""
        tracker = ProgressTracker(self.display, file_size=1000)
        tracker.on_progress(ProgressEvent(loaded=1100, total=1200))
        self.assertEqual(self.display.widths, [])

    def test_completion_forces_full_bar(self):
        """Test that loaded == total shows exactly 100 after a lower estimate."""
        tracker = ProgressTracker(self.display, file_size=1000)
        tracker.on_progress(ProgressEvent(loaded=990, total=1180))
        self.assertEqual(self.display.widths, [99])

        tracker.on_progress(ProgressEvent(loaded=1180, total=1180))
        self.assertEqual(self.display.widths[-1], 100)
        self.assertEqual(self.display.labels[-1], "100%")

    def test_completion_within_file_size(self):
        """Test a transfer whose total does not exceed the file size."""
        tracker = ProgressTracker(self.display, file_size=500)
        tracker.on_progress(ProgressEvent(loaded=500, total=500))
        self.assertEqual(self.display.widths, [100, 100])

    def test_zero_byte_file(self):
        """Test that an empty file skips the ratio and still completes."""
        tracker = ProgressTracker(self.display, file_size=0)
        tracker.on_progress(ProgressEvent(loaded=0, total=180))
        self.assertEqual(self.display.widths, [])

        tracker.on_progress(ProgressEvent(loaded=180, total=180))
        self.assertEqual(self.display.widths, [100])


class TestConsoleProgressDisplay(unittest.TestCase):
    """Test cases for the logging display."""

    def test_logs_only_changes(self):
        display = ConsoleProgressDisplay()
        with patch('client.files.progress.logger') as mock_logger:
            display.show_percent(50)
            display.show_percent(50)
            display.show_percent(100)

        self.assertEqual(mock_logger.log_upload_progress.call_count, 2)
        mock_logger.log_upload_progress.assert_called_with("100%")
        self.assertEqual(display.width, 100)
        self.assertEqual(display.label, "100%")


if __name__ == '__main__':
    unittest.main()
