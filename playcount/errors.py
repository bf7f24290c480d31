"""Error types raised by the play count pipeline."""
from pathlib import Path
from typing import Union


class PlayCountError(Exception):
    """Base class for every error the analyzer reports."""


class UsageError(PlayCountError):
    """No input path was given on the command line."""


class InputFileNotFound(PlayCountError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Input file '{path}' does not exist.")


class InvalidDateFormat(PlayCountError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid date format: {text}")


class MalformedRecord(PlayCountError):
    """A single data line could not be turned into a play record."""


class IOFailure(PlayCountError):
    """Reading the input or writing the results failed."""
