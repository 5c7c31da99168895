"""
Collapsing of repeated all-zero lines.
"""

from .binary_reader import ByteWindow
from .config import LINE_WIDTH


class ZeroRunTracker:
    """
    Decides which windows are elided as repeats of an all-zero line.

    The first zero line of a run is shown and so is the first line after it;
    only the full-width zero lines in between are dropped, and a single '*'
    marker is owed in their place.
    """

    def __init__(self, suppression_enabled: bool = True, line_width: int = LINE_WIDTH):
        self.suppression_enabled = suppression_enabled
        self.line_width = line_width
        self.last_was_all_zero = False
        self.skipped_count = 0

    def is_all_zero(self, window: ByteWindow) -> bool:
        return self.suppression_enabled and not any(window.data)

    def classify(self, window: ByteWindow) -> bool:
        """Return True if the window should be elided."""
        all_zero = self.is_all_zero(window)
        if all_zero and self.last_was_all_zero and window.n == self.line_width:
            self.skipped_count += 1
            return True
        self.last_was_all_zero = all_zero
        return False

    def take_marker(self) -> bool:
        """Return True once per run of elided windows, resetting the count."""
        if not self.skipped_count:
            return False
        self.skipped_count = 0
        return True
