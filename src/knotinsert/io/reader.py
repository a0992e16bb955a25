"""Path reader for loading editor documents.

This module provides the PathReader class for loading JSON path files
into editor documents.
"""

import json
from pathlib import Path

from knotinsert.exceptions import SessionFormatError
from knotinsert.io.converter import EditorDocument, dict_to_document


class PathReader:
    """Loads JSON path documents.

    Example:
        reader = PathReader(Path("curve.json"))
        document = reader.load()
        path = document.to_path()
    """

    def __init__(self, file_path: Path) -> None:
        """Initialize the path reader.

        Args:
            file_path: Path to the JSON document
        """
        self._file_path = file_path

    def load(self) -> EditorDocument:
        """Load and validate the document.

        Returns:
            The loaded editor document

        Raises:
            FileNotFoundError: If the file does not exist
            SessionFormatError: If the file is not a valid path document
        """
        if not self._file_path.exists():
            raise FileNotFoundError(f"Path file not found: {self._file_path}")

        text = self._file_path.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SessionFormatError(str(self._file_path), f"invalid JSON ({e.msg})") from e

        return dict_to_document(data, source=str(self._file_path))
