"""
Schema extraction from TypeScript declaration sources.

Parses the source with tree-sitter and turns every top-level interface
(or object type alias) into an ActionDescriptor. Tree-sitter nodes are
first classified into a small closed set of declaration shapes; anything
outside that set is ignored.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from .annotations import RawTag, extract_tags, parse_annotations
from .errors import DuplicateActionError, SourceUnreadableError, UnrenderableTypeError
from .naming import to_constant_case, uncapitalise
from .schema import ActionDescriptor, Field, ParsedSource
from ...logging_config import get_logger

logger = get_logger(__name__)

TYPESCRIPT = Language(tree_sitter_typescript.language_typescript())

# interface_body in current grammars, object_type in older ones
_RECORD_BODY_TYPES = {"interface_body", "object_type"}


@dataclass(frozen=True)
class PropertySignature:
    name: str
    type_text: Optional[str]
    optional: bool


@dataclass(frozen=True)
class RecordDeclaration:
    name: str
    members: Tuple["DeclarationNode", ...]
    doc_comments: Tuple[str, ...]


@dataclass(frozen=True)
class ImportStatement:
    text: str


@dataclass(frozen=True)
class UnsupportedNode:
    kind: str


DeclarationNode = Union[RecordDeclaration, PropertySignature, ImportStatement, UnsupportedNode]


def _node_text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8")


def _doc_comments(node: Node, source_bytes: bytes) -> Tuple[str, ...]:
    """Collect the JSDoc comments directly preceding a top-level node."""
    comments: List[str] = []
    sibling = node.prev_sibling
    while sibling is not None and sibling.type == "comment":
        text = _node_text(sibling, source_bytes)
        if text.startswith("/**"):
            comments.append(text)
        sibling = sibling.prev_sibling
    return tuple(reversed(comments))


def _classify_member(node: Node, source_bytes: bytes) -> DeclarationNode:
    if node.type != "property_signature":
        return UnsupportedNode(node.type)

    name_node = node.child_by_field_name("name")
    annotation = node.child_by_field_name("type")
    type_text = None
    if annotation is not None and annotation.named_children:
        type_text = _node_text(annotation.named_children[0], source_bytes)

    return PropertySignature(
        name=_node_text(name_node, source_bytes),
        type_text=type_text,
        optional=any(child.type == "?" for child in node.children),
    )


def _record_body(node: Node) -> Optional[Node]:
    if node.type == "interface_declaration":
        return node.child_by_field_name("body")
    if node.type == "type_alias_declaration":
        value = node.child_by_field_name("value")
        if value is not None and value.type == "object_type":
            return value
    return None


def classify(node: Node, source_bytes: bytes) -> DeclarationNode:
    """Map a top-level tree-sitter node onto one of the known declaration shapes."""
    if node.type == "import_statement":
        return ImportStatement(_node_text(node, source_bytes))

    target = node
    if node.type == "export_statement":
        declaration = node.child_by_field_name("declaration")
        if declaration is None:
            return UnsupportedNode(node.type)
        target = declaration

    body = _record_body(target)
    if body is None or body.type not in _RECORD_BODY_TYPES:
        return UnsupportedNode(target.type)

    name_node = target.child_by_field_name("name")
    return RecordDeclaration(
        name=_node_text(name_node, source_bytes),
        members=tuple(
            _classify_member(member, source_bytes) for member in body.named_children
        ),
        # JSDoc attaches to the outermost statement, i.e. before `export`
        doc_comments=_doc_comments(node, source_bytes),
    )


def _to_field(record_name: str, member: PropertySignature) -> Field:
    if member.type_text is None:
        raise UnrenderableTypeError(record_name, member.name)
    return Field(name=member.name, type=member.type_text, optional=member.optional)


def to_descriptor(record: RecordDeclaration) -> ActionDescriptor:
    """Convert a classified record declaration to an ActionDescriptor."""
    fields = []
    for member in record.members:
        match member:
            case PropertySignature():
                fields.append(_to_field(record.name, member))
            case _:
                logger.debug("Skipping %s member of %s", member, record.name)

    tags: List[RawTag] = [
        tag for comment in record.doc_comments for tag in extract_tags(comment)
    ]
    return ActionDescriptor(
        name=record.name,
        fields=tuple(fields),
        annotations=parse_annotations(tags),
    )


def parse_tree(source: str) -> Node:
    """Parse TypeScript source and return the root node of its syntax tree."""
    parser = Parser(TYPESCRIPT)
    tree = parser.parse(source.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        raise SourceUnreadableError(_describe_syntax_error(root))
    return root


def _describe_syntax_error(root: Node) -> str:
    for node in _walk(root):
        if node.type == "ERROR" or node.is_missing:
            row, column = node.start_point
            return f"Syntax error at line {row + 1}, column {column + 1}"
    return "Syntax error in declaration source"


def _walk(node: Node) -> Iterator[Node]:
    yield node
    for child in node.children:
        yield from _walk(child)


def iter_declarations(root: Node, source_bytes: bytes) -> Iterator[DeclarationNode]:
    """Classify every top-level statement of a parsed source, in order."""
    for node in root.named_children:
        if node.type == "comment":
            continue
        yield classify(node, source_bytes)


def _check_unique(actions: Tuple[ActionDescriptor, ...]) -> None:
    """Reject records whose enum constants or creator names would coincide."""
    constants: Dict[str, str] = {}
    creators: Dict[str, str] = {}
    for action in actions:
        derived = (
            (to_constant_case(action.name), constants),
            (uncapitalise(action.name), creators),
        )
        for key, seen in derived:
            if key in seen:
                raise DuplicateActionError(action.name, seen[key])
        for key, seen in derived:
            seen[key] = action.name


def extract_source(source: str) -> ParsedSource:
    """
    Extract actions and pass-through imports from TypeScript source.

    Args:
        source: Declaration source text

    Returns:
        ParsedSource with actions and imports in declaration order

    Raises:
        SourceUnreadableError: If the source does not parse
        UnrenderableTypeError: If a property has no type annotation
        MalformedAnnotationError: If a tag argument is not valid JSON
        DuplicateActionError: If two records share a name, enum constant
            or creator name
    """
    source_bytes = source.encode("utf-8")
    declarations = tuple(iter_declarations(parse_tree(source), source_bytes))

    actions = []
    imports = []
    for declaration in declarations:
        match declaration:
            case RecordDeclaration():
                actions.append(to_descriptor(declaration))
            case ImportStatement(text=text):
                imports.append(text)
            case UnsupportedNode(kind=kind):
                logger.debug("Ignoring top-level %s", kind)

    parsed = ParsedSource(actions=tuple(actions), imports=tuple(imports))
    _check_unique(parsed.actions)
    logger.debug(
        "Extracted %d action(s) and %d import(s)", len(parsed.actions), len(parsed.imports)
    )
    return parsed


def extract_actions(source: str) -> Tuple[ActionDescriptor, ...]:
    """Extract only the action descriptors from TypeScript source."""
    return extract_source(source).actions
