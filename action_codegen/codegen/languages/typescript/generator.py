"""
TypeScript action code generator.

Generates a redux-style actions module: an Actions enum, a metadata
table, payload action types, the Action union and action creators.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.generator import CodeGenerator
from ...core.metadata import build_metadata_table
from ...core.naming import NamingCase, convert_case
from ...core.schema import ActionDescriptor, Metadata, ParsedSource
from ....logging_config import get_logger

logger = get_logger(__name__)

ACTION_TYPE_SUFFIX = "Action"


def _literal(value: str) -> str:
    """Render a string as a TypeScript string literal."""
    return json.dumps(value, ensure_ascii=False)


class TypeScriptActionGenerator(CodeGenerator):
    """Code generator for TypeScript redux actions."""

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    # Derived names

    def action_constant(self, action: ActionDescriptor) -> str:
        return convert_case(action.name, NamingCase.CONSTANT)

    def action_value(self, action: ActionDescriptor) -> str:
        """
        Get the value of an action's enum member, e.g. for action FooBar
        in the baz feature this is "[baz] foo bar".
        """
        prefix = f"[{self.feature}] " if self.feature else ""
        return prefix + convert_case(action.name, NamingCase.SENTENCE)

    def action_type_name(self, action: ActionDescriptor) -> str:
        return action.name + ACTION_TYPE_SUFFIX

    def creator_name(self, action: ActionDescriptor) -> str:
        return convert_case(action.name, NamingCase.UNCAPITALISED)

    # Sections

    def generate(self, parsed: ParsedSource) -> str:
        """Generate the complete actions module."""
        metadata = build_metadata_table(parsed.actions, self.feature)

        parts = [
            self._render_header(parsed.imports),
            self._render_enum(parsed.actions),
            self._render_metadata(metadata),
            self._render_action_types(parsed.actions),
            self._render_union(parsed.actions),
        ]

        creators = [self._render_creator(action) for action in parsed.actions]
        if creators:
            parts.append("\n\n".join(creators))

        # Exactly one blank line between sections
        return "\n\n".join(part.strip() for part in parts) + "\n"

    def generate_single_action(self, action: ActionDescriptor) -> str:
        """Generate the payload action type for one action."""
        context = {
            "type_name": self.action_type_name(action),
            "actions_alias": self.config.actions_alias,
            "record_name": action.name,
            "constant": self.action_constant(action),
        }
        return self.render_template("action_type.ts.j2", context).strip()

    def _render_header(self, imports) -> str:
        context = {
            "redux_module": _literal(self.config.redux_module),
            "actions_alias": self.config.actions_alias,
            "actions_module": _literal(self.config.actions_module),
            "imports": [statement.strip() for statement in imports],
        }
        return self.render_template("header.ts.j2", context)

    def _render_enum(self, actions) -> str:
        members = [
            {"constant": self.action_constant(action), "value": _literal(self.action_value(action))}
            for action in actions
        ]
        return self.render_template("enum.ts.j2", {"members": members})

    def _render_metadata(self, metadata: Dict[str, Metadata]) -> str:
        entries = [
            {"constant": constant, "meta": self._serialize_metadata(meta)}
            for constant, meta in metadata.items()
        ]
        return self.render_template("metadata.ts.j2", {"entries": entries})

    def _serialize_metadata(self, meta: Metadata) -> str:
        return json.dumps(meta, indent=self.config.metadata_indent, ensure_ascii=False)

    def _render_action_types(self, actions) -> str:
        parts = [self.render_template("payload_action.ts.j2", {}).strip()]
        parts.extend(self.generate_single_action(action) for action in actions)
        return "\n\n".join(parts)

    def _render_union(self, actions) -> str:
        type_names = [self.action_type_name(action) for action in actions]
        return self.render_template("union.ts.j2", {"type_names": type_names})

    def _render_creator(self, action: ActionDescriptor) -> str:
        context: Dict[str, Any] = {
            "creator_name": self.creator_name(action),
            "fields": self._field_data(action),
            "type_name": self.action_type_name(action),
            "constant": self.action_constant(action),
        }
        logger.debug("Rendering creator %s", context["creator_name"])
        return self.render_template("creator.ts.j2", context).strip()

    @staticmethod
    def _field_data(action: ActionDescriptor) -> List[Dict[str, Any]]:
        return [
            {"name": field.name, "type": field.type, "optional": field.optional}
            for field in action.fields
        ]
