"""
Core code generation components.

Provides the action model, naming algebra, extraction, metadata and
base generator used by the target generators.
"""

from .annotations import extract_tags, parse_annotations
from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .errors import (
    DuplicateActionError,
    GeneratorError,
    MalformedAnnotationError,
    SourceUnreadableError,
    UnrenderableTypeError,
)
from .extractor import extract_actions, extract_source
from .generator import CodeGenerator, GenerationResult, generate_code
from .metadata import build_metadata, build_metadata_table
from .naming import NamingCase, convert_case, to_constant_case, to_sentence, uncapitalise
from .schema import ActionDescriptor, Annotation, Field, JsonValue, ParsedSource
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Errors
    "GeneratorError",
    "SourceUnreadableError",
    "MalformedAnnotationError",
    "UnrenderableTypeError",
    "DuplicateActionError",
    # Model
    "ActionDescriptor",
    "Annotation",
    "Field",
    "JsonValue",
    "ParsedSource",
    # Extraction
    "extract_source",
    "extract_actions",
    "extract_tags",
    "parse_annotations",
    # Metadata
    "build_metadata",
    "build_metadata_table",
    # Naming
    "NamingCase",
    "convert_case",
    "to_constant_case",
    "to_sentence",
    "uncapitalise",
    # Configuration
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Templates
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
