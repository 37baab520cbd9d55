"""Default file access used by the single file generator.

These are the reader and writer the orchestrator falls back to when the host
does not inject its own. Both work on UTF-8 text.
"""

from pathlib import Path

from .logging_config import get_logger

logger = get_logger(__name__)


class FileIOError(Exception):
    """Raised when a feature file cannot be read or an output file written."""

    pass


def read_text_file(file_path: str | Path) -> str:
    """Read the whole content of a text file.

    Args:
        file_path: Path to the file.

    Returns:
        File content.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        FileIOError: If the file exists but cannot be read or decoded.
    """
    file_path = Path(file_path)
    logger.debug("Reading input file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8-sig") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileIOError(f"File {file_path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise FileIOError(f"Error reading file {file_path}: {e}") from e


def write_text_file(file_path: str | Path, content: str) -> None:
    """Write text to a file, replacing whatever was there.

    Line endings in ``content`` are written as given.

    Args:
        file_path: Destination path. The parent directory must exist.
        content: Text to write.

    Raises:
        FileIOError: If the file cannot be written.
    """
    file_path = Path(file_path)
    logger.debug("Writing output file: %s (%d chars)", file_path, len(content))

    try:
        with file_path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileIOError(f"Error writing file {file_path}: {e}") from e
