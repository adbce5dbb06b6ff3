"""
Annotation parsing for action records.

Annotations are JSDoc tags of the form

    @foo {"key1": "blah", "key2": [1, 2, 3]}

i.e. ``@<IDENT> [<JSON>]``. When the JSON argument is omitted the
annotation value defaults to ``true``.
"""

import json
import re
from typing import Iterable, List, Tuple

from .errors import MalformedAnnotationError
from .schema import Annotation
from ...logging_config import get_logger

logger = get_logger(__name__)

RawTag = Tuple[str, str]

_TAG_LINE = re.compile(r"^@(?P<name>[A-Za-z_$][\w$]*)(?P<text>.*)$")


def _comment_lines(comment: str) -> List[str]:
    """Strip comment delimiters and leading asterisks from each line."""
    body = comment.strip()
    if body.startswith("/**"):
        body = body[3:]
    elif body.startswith("/*"):
        body = body[2:]
    if body.endswith("*/"):
        body = body[:-2]

    lines = []
    for line in body.splitlines():
        stripped = line.strip()
        if stripped.startswith("*"):
            stripped = stripped[1:].strip()
        lines.append(stripped)
    return lines


def extract_tags(comment: str) -> List[RawTag]:
    """
    Split a raw JSDoc comment into ordered (tag name, tag text) pairs.

    A tag starts on a line beginning with ``@identifier``. Following lines
    that do not start a new tag continue the current tag's text. Lines
    before the first tag are the free-form description and are skipped.

    Args:
        comment: Full comment text including the ``/**`` and ``*/`` markers

    Returns:
        List of (name, text) pairs with the text stripped
    """
    tags: List[RawTag] = []
    current_name = None
    current_text: List[str] = []

    for line in _comment_lines(comment):
        match = _TAG_LINE.match(line)
        if match:
            if current_name is not None:
                tags.append((current_name, "\n".join(current_text).strip()))
            current_name = match.group("name")
            current_text = [match.group("text")]
        elif current_name is not None:
            current_text.append(line)

    if current_name is not None:
        tags.append((current_name, "\n".join(current_text).strip()))

    return tags


def _reject_constant(constant: str):
    # json.loads accepts these, strict JSON does not
    raise ValueError(f"{constant} is not a JSON value")


def parse_annotation(name: str, text: str) -> Annotation:
    """Parse a single tag into an Annotation, raising on malformed JSON."""
    if not text:
        return Annotation(name=name, arg=True)
    try:
        arg = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise MalformedAnnotationError(name, text, e.msg) from e
    except ValueError as e:
        raise MalformedAnnotationError(name, text, str(e)) from e
    return Annotation(name=name, arg=arg)


def parse_annotations(tags: Iterable[RawTag]) -> Tuple[Annotation, ...]:
    """
    Convert raw tag pairs into annotations, preserving source order.

    Args:
        tags: (name, text) pairs as produced by extract_tags

    Returns:
        Tuple of annotations

    Raises:
        MalformedAnnotationError: If any tag text is not valid JSON
    """
    annotations = tuple(parse_annotation(name, text) for name, text in tags)
    logger.debug("Parsed %d annotation(s)", len(annotations))
    return annotations
