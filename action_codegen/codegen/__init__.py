"""
Action Code Generation Module

Generates redux action boilerplate from TypeScript action declarations.
"""

from .core.config import ConfigError, GeneratorConfig, load_config
from .core.errors import GeneratorError
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.schema import ActionDescriptor, Annotation, Field, ParsedSource
from .driver import ListWriter, LineWriter, StreamWriter, generate_from_source, run
from .languages.typescript import TypeScriptActionGenerator


def quick_generate(source: str, feature: str = None, **options) -> str:
    """
    Quick code generation from declaration source text.

    Args:
        source: TypeScript declaration source
        feature: Optional run-level feature label
        **options: Additional GeneratorConfig settings

    Returns:
        Generated code string
    """
    config = load_config(custom_config={"feature": feature, **options})
    return generate_from_source(source, config).code


__all__ = [
    "ActionDescriptor",
    "Annotation",
    "Field",
    "ParsedSource",
    "CodeGenerator",
    "TypeScriptActionGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "ConfigError",
    "LineWriter",
    "ListWriter",
    "StreamWriter",
    "generate_code",
    "generate_from_source",
    "load_config",
    "quick_generate",
    "run",
]
