"""
File selection module.

Holds the file currently chosen by the user, the way a file input does.
"""

from typing import List, Optional

from common.protocol_definitions import SelectedFile


class FileSelection:
    """File-selection control holding at most one file."""

    def __init__(self, path=None):
        self._selected: Optional[SelectedFile] = None
        if path is not None:
            self.select(path)

    @property
    def files(self) -> List[SelectedFile]:
        """Currently selected files; empty when nothing is selected."""
        return [self._selected] if self._selected is not None else []

    def select(self, path) -> SelectedFile:
        """Select ``path``, replacing any previous selection."""
        self._selected = SelectedFile.from_path(path)
        return self._selected

    def clear(self):
        self._selected = None
