"""
Core schema representation for action code generation.

Holds the normalized model extracted from a declaration source. Every
object here is immutable and lives only for one generation run.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

# Closed set of values a JSON annotation argument can take.
JsonValue = Union[bool, int, float, str, None, List["JsonValue"], Dict[str, "JsonValue"]]

Metadata = Dict[str, JsonValue]


@dataclass(frozen=True)
class Field:
    """A single property of an action record."""

    name: str
    type: str  # opaque source text, never interpreted
    optional: bool = False


@dataclass(frozen=True)
class Annotation:
    """A documentation tag attached to an action record."""

    name: str
    arg: JsonValue = True


@dataclass(frozen=True)
class ActionDescriptor:
    """An action as declared in the source: name, fields and annotations."""

    name: str
    fields: Tuple[Field, ...] = ()
    annotations: Tuple[Annotation, ...] = ()

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by name."""
        for item in self.fields:
            if item.name == name:
                return item
        return None

    def get_annotations(self, name: str) -> Tuple[Annotation, ...]:
        """Get every annotation with the given tag name, in source order."""
        return tuple(ann for ann in self.annotations if ann.name == name)


@dataclass(frozen=True)
class ParsedSource:
    """Everything the extractor pulls out of one declaration file."""

    actions: Tuple[ActionDescriptor, ...] = ()
    imports: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def action_names(self) -> List[str]:
        return [action.name for action in self.actions]
