"""
Exceptions raised during action code generation.

Every failure is fatal for the run: nothing is retried and no partial
output is produced. All errors share the GeneratorError base so callers
have a single point to catch them.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SourceUnreadableError(GeneratorError):
    """The declaration source could not be read or parsed."""

    pass


class MalformedAnnotationError(GeneratorError):
    """A documentation tag carries an argument that is not valid JSON."""

    def __init__(self, tag_name: str, text: str, reason: str):
        self.tag_name = tag_name
        self.text = text
        super().__init__(f"Malformed argument for @{tag_name}: {text!r} ({reason})")


class UnrenderableTypeError(GeneratorError):
    """A record member has no type that can be rendered as text."""

    def __init__(self, record_name: str, field_name: str):
        self.record_name = record_name
        self.field_name = field_name
        super().__init__(
            f"Cannot render type of {record_name}.{field_name}: missing type annotation"
        )


class DuplicateActionError(GeneratorError):
    """Two records in the same source share a name or a derived name."""

    def __init__(self, name: str, previous: Optional[str] = None):
        self.name = name
        self.previous = previous or name
        if self.previous == name:
            message = f"Action '{name}' is declared more than once"
        else:
            message = f"Action '{name}' clashes with '{self.previous}' after name conversion"
        super().__init__(message)
