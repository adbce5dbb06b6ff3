"""
Metadata building for action records.

Annotations are applied in declaration order so a later tag overwrites an
earlier one with the same name. The run's feature label is applied last
and always wins over a ``feature`` annotation.
"""

from typing import Dict, Iterable, Optional

from .naming import to_constant_case
from .schema import ActionDescriptor, Metadata

FEATURE_KEY = "feature"


def build_metadata(descriptor: ActionDescriptor, feature: Optional[str] = None) -> Metadata:
    """Merge an action's annotations and the run's feature label."""
    metadata: Metadata = {}
    for annotation in descriptor.annotations:
        metadata[annotation.name] = annotation.arg
    if feature:
        metadata[FEATURE_KEY] = feature
    return metadata


def build_metadata_table(
    descriptors: Iterable[ActionDescriptor], feature: Optional[str] = None
) -> Dict[str, Metadata]:
    """Build metadata for every action, keyed by its enum constant, in order."""
    return {
        to_constant_case(descriptor.name): build_metadata(descriptor, feature)
        for descriptor in descriptors
    }


def overridden_feature_annotations(
    descriptors: Iterable[ActionDescriptor], feature: Optional[str] = None
) -> Dict[str, object]:
    """Map action name to the feature annotation the run label replaces."""
    if not feature:
        return {}
    overridden = {}
    for descriptor in descriptors:
        tagged = descriptor.get_annotations(FEATURE_KEY)
        if tagged and tagged[-1].arg != feature:
            overridden[descriptor.name] = tagged[-1].arg
    return overridden
