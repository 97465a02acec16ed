"""Filtering and sanitisation of compliance entities.

Entities are the per-field compliance annotations of a dataset. Before they
are handed to the UI for editing, entities marked readonly are filtered out;
before they are submitted back, the transient ``readonly`` marker is removed.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from waivern_dataset_compliance.utils import fleece

logger = logging.getLogger(__name__)

READONLY_ATTRIBUTE = "readonly"

_strip_readonly = fleece([READONLY_ATTRIBUTE])

E = TypeVar("E", bound=Mapping[str, Any])


def is_editable_compliance_entity(entity: Mapping[str, Any]) -> bool:
    """Check whether a compliance entity may be edited.

    Only an entity whose ``readonly`` attribute is exactly ``True`` is
    excluded. A missing attribute, ``False``, or truthy non-bool values such
    as ``"true"`` or ``1`` all count as editable.

    Args:
        entity: Compliance entity mapping

    Returns:
        True unless the entity is marked readonly

    """
    return entity.get(READONLY_ATTRIBUTE) is not True


def filter_editable_entities(entities: Iterable[E]) -> list[E]:
    """Keep only the editable entities, preserving their relative order.

    The returned list holds the original entity objects, not copies.
    """
    editable = [entity for entity in entities if is_editable_compliance_entity(entity)]
    logger.debug(f"Retained {len(editable)} editable compliance entities")
    return editable


def remove_readonly_attr(entities: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Strip the readonly attribute from every compliance entity.

    Each entity is rebuilt as a new dict holding all of its other attributes
    unchanged, so the input entities are never mutated. Applying this to its
    own output returns an equal list.

    Args:
        entities: Compliance entity mappings

    Returns:
        New entity dicts, same length and order as the input

    """
    return [_strip_readonly(entity) for entity in entities]
