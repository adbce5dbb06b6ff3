"""
action_codegen: redux action boilerplate from TypeScript declarations.
"""

from .codegen import (
    GeneratorConfig,
    GeneratorError,
    ListWriter,
    StreamWriter,
    TypeScriptActionGenerator,
    generate_from_source,
    load_config,
    quick_generate,
    run,
)

__version__ = "0.1.0"

__all__ = [
    "GeneratorConfig",
    "GeneratorError",
    "ListWriter",
    "StreamWriter",
    "TypeScriptActionGenerator",
    "generate_from_source",
    "load_config",
    "quick_generate",
    "run",
    "__version__",
]
