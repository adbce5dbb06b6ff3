"""
Generation driver: source file -> extractor -> generator -> line sink.

The full output is rendered before the first line is written, so a
failing run leaves the writer untouched.
"""

from pathlib import Path
from typing import List, Optional, Protocol, TextIO

from .core.config import GeneratorConfig
from .core.extractor import extract_source
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .languages.typescript import TypeScriptActionGenerator
from ..logging_config import get_logger
from ..utils import load_source

logger = get_logger(__name__)


class LineWriter(Protocol):
    """Accepts lines of text, in order."""

    def write(self, text: str = "") -> None:
        """Consumes a line of text."""
        ...


class StreamWriter:
    """Writes each line, newline-terminated, to a text stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write(self, text: str = "") -> None:
        self.stream.write(text + "\n")


class ListWriter:
    """Collects lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def generate_from_source(
    source: str,
    config: Optional[GeneratorConfig] = None,
    generator: Optional[CodeGenerator] = None,
) -> GenerationResult:
    """Extract actions from source text and generate code for them."""
    generator = generator or TypeScriptActionGenerator(config)
    parsed = extract_source(source)
    return generate_code(generator, parsed)


def run(
    filename: str | Path,
    writer: LineWriter,
    config: Optional[GeneratorConfig] = None,
) -> GenerationResult:
    """
    Generate the actions module for one declaration file.

    Args:
        filename: Path to the declaration source
        writer: Line sink receiving the generated code
        config: Run configuration (feature label, import modules)

    Returns:
        GenerationResult for the run

    Raises:
        GeneratorError: On any read, parse, extraction or render failure;
            nothing is written in that case
    """
    logger.info("Generating actions from %s", filename)
    result = generate_from_source(load_source(filename), config)
    for line in result.lines:
        writer.write(line)
    return result
