"""
Base generator interface for action code generation targets.

Defines the contract that target generators implement and the
generate_code entry point that validates, renders and formats.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import GeneratorConfig
from .metadata import overridden_feature_annotations
from .schema import ActionDescriptor, ParsedSource
from .templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for action code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        # Blank labels count as no label
        self.feature = (self.config.feature or "").strip() or None
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, parsed: ParsedSource) -> str:
        """
        Generate code for every action of a parsed source.

        Args:
            parsed: Actions and pass-through imports

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_single_action(self, action: ActionDescriptor) -> str:
        """Generate the payload action type for a single action."""
        pass

    def validate_actions(self, parsed: ParsedSource) -> List[str]:
        """
        Check actions for issues that do not stop generation.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for action in parsed.actions:
            if not action.fields:
                warnings.append(f"Action '{action.name}' has no fields")

        overridden = overridden_feature_annotations(parsed.actions, self.feature)
        for name, value in overridden.items():
            warnings.append(
                f"Action '{name}' feature annotation {value!r} is replaced by "
                f"run feature {self.feature!r}"
            )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Normalize the ends of generated code.

        Sections are already separated by generate(). Lines inside a
        section may hold field types copied verbatim from the source, so
        only the blank lines around the whole module are removed.
        """
        return code.strip("\n")

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}

    @property
    def lines(self) -> List[str]:
        """The generated code split into output lines."""
        return self.code.split("\n") if self.code else []


def generate_code(generator: CodeGenerator, parsed: ParsedSource) -> GenerationResult:
    """
    Generate code using the specified generator.

    Errors propagate to the caller; nothing is returned for a failed run.

    Args:
        generator: Code generator instance
        parsed: Extracted actions and imports

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    warnings = generator.validate_actions(parsed)
    for warning in warnings:
        logger.warning(warning)

    code = generator.format_code(generator.generate(parsed))

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "action_count": len(parsed.actions),
        "import_count": len(parsed.imports),
        "feature": generator.feature,
    }
    logger.info("Generated %d action(s) for %s", len(parsed.actions), generator.language_name)

    return GenerationResult(code, warnings, metadata)
