from pathlib import Path
from typing import List, Optional, Union

from .config import settings
from .errors import InputFileNotFound, IOFailure


def load_lines(path: Union[str, Path], encoding: Optional[str] = None) -> List[str]:
    """Read the whole input file into memory, one entry per line."""
    path = Path(path)
    if not path.is_file():
        raise InputFileNotFound(path)
    try:
        with path.open("r", encoding=encoding or settings.input_encoding, errors="replace") as f:
            return [line.rstrip("\n") for line in f]
    except OSError as exc:
        raise IOFailure(f"Could not read input file '{path}': {exc}") from exc
