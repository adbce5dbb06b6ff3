"""Utility functions for loading declaration sources.

Reading failures are reported as SourceUnreadableError so the CLI treats
them like any other fatal generation error.
"""

from pathlib import Path

from .codegen.core.errors import SourceUnreadableError
from .logging_config import get_logger

logger = get_logger(__name__)

# Path.suffix of "x.d.ts" is ".ts"
DECLARATION_SUFFIXES = {".ts", ".tsx"}


def load_source(file_path: str | Path) -> str:
    """Read a declaration source file.

    Args:
        file_path: Path to the TypeScript declaration file.

    Returns:
        The file contents.

    Raises:
        SourceUnreadableError: If the file is missing, unreadable or not UTF-8.
    """
    file_path = Path(file_path)
    logger.debug(f"Loading declaration source: {file_path}")

    if not file_path.is_file():
        logger.error(f"File not found: {file_path}")
        raise SourceUnreadableError(f"File not found: {file_path}")

    if file_path.suffix.lower() not in DECLARATION_SUFFIXES:
        # Might still be valid TypeScript
        logger.warning(f"File does not have a TypeScript extension: {file_path}")

    try:
        source = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"File is not valid UTF-8: {file_path}")
        raise SourceUnreadableError(f"File is not valid UTF-8: {file_path}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SourceUnreadableError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Loaded {len(source)} characters from {file_path}")
    return source
