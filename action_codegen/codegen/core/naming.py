"""
Naming utilities for action code generation.

Every generated identifier and string literal is derived from the
declared record name through one shared segmentation rule: a new
segment starts at each uppercase ASCII letter.

    goToThing   -> ["go", "To", "Thing"]
    AttemptLogin -> ["Attempt", "Login"]
"""

import re
from enum import Enum
from typing import List

_SEGMENT_BOUNDARY = re.compile(r"(?=[A-Z])")


class NamingCase(Enum):
    """Naming forms derived from a record name."""

    CONSTANT = "constant"  # GO_TO_THING
    SENTENCE = "sentence"  # go to thing
    UNCAPITALISED = "uncapitalised"  # goToThing
    ORIGINAL = "original"  # GoToThing


def split_segments(name: str) -> List[str]:
    """Split a name before every uppercase letter, dropping empty pieces."""
    return [segment for segment in _SEGMENT_BOUNDARY.split(name) if segment]


def to_constant_case(name: str) -> str:
    """Convert fooBar to FOO_BAR."""
    return "_".join(segment.upper() for segment in split_segments(name))


def to_sentence(name: str) -> str:
    """Convert fooBarBaz to foo bar baz."""
    return " ".join(segment.lower() for segment in split_segments(name))


def uncapitalise(name: str) -> str:
    """Return the name with only its first letter lowercased."""
    return name[:1].lower() + name[1:]


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert a record name to the requested form."""
    if target_case == NamingCase.CONSTANT:
        return to_constant_case(name)
    elif target_case == NamingCase.SENTENCE:
        return to_sentence(name)
    elif target_case == NamingCase.UNCAPITALISED:
        return uncapitalise(name)
    else:
        return name
