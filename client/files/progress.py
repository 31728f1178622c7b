"""
Upload progress module.

This module projects transport progress notifications onto a progress
display.
"""

from client.utils.logger import logger
from common.constants import PROGRESS_COMPLETE
from common.protocol_definitions import ProgressEvent, progress_percent


class ProgressDisplay:
    """Target that shows upload progress as a width and a text label."""

    def set_width(self, percent: int):
        """Set the visual fill of the bar, in percent."""
        raise NotImplementedError

    def set_label(self, text: str):
        """Set the text shown on the bar."""
        raise NotImplementedError

    def show_percent(self, percent: int):
        """Write ``percent`` to both width and label."""
        self.set_width(percent)
        self.set_label(f"{percent}%")


class ConsoleProgressDisplay(ProgressDisplay):
    """Progress display that reports through the client logger."""

    def __init__(self):
        self.width = 0
        self.label = ''

    def set_width(self, percent: int):
        self.width = percent

    def set_label(self, text: str):
        # Framing overhead can repeat a value, log only changes
        if text != self.label:
            logger.log_upload_progress(text)
        self.label = text


class ProgressTracker:
    """Turns progress notifications of one transfer into display updates."""

    def __init__(self, display: ProgressDisplay, file_size: int):
        self.display = display
        self.file_size = file_size

    def on_progress(self, event: ProgressEvent):
        """Handle a transport progress notification."""
        # Zero-byte files have no meaningful ratio
        if self.file_size > 0 and event.loaded <= self.file_size:
            self.display.show_percent(progress_percent(event.loaded, self.file_size))

        if event.loaded == event.total:
            self.display.show_percent(PROGRESS_COMPLETE)
