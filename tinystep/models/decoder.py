"""Strict decoder for polymorphic provisioner lists.

Each element is checked in a fixed order: it must be an object, it must
carry a string ``type``, the tag must be a known ``ProvisionerType``, and the
object must validate against that tag's model. The first failure aborts the
whole list; no partial result is ever returned.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..core.enums import ProvisionerType
from ..core.exceptions import (
    MissingOrNonStringTag,
    NotAnArray,
    NotAnObject,
    UnknownVariantTag,
    VariantShapeError,
)
from ..utils.kinds import json_kind
from .provisioner import PROVISIONER_MODELS, Provisioner

logger = logging.getLogger(__name__)

TAG_FIELD = "type"


def decode_provisioner(element: Any, index: int = 0) -> Provisioner:
    """Decode one tagged provisioner object.

    Args:
        element: Parsed JSON value
        index: Position of the element in its list, used in error messages

    Raises:
        NotAnObject: ``element`` is not an object
        MissingOrNonStringTag: ``type`` is absent or not a string
        UnknownVariantTag: ``type`` is not a known provisioner type
        VariantShapeError: The object does not fit its type's model
    """
    if not isinstance(element, dict):
        raise NotAnObject(index, json_kind(element))

    if TAG_FIELD not in element:
        raise MissingOrNonStringTag(index, "missing")
    tag = element[TAG_FIELD]
    if not isinstance(tag, str):
        raise MissingOrNonStringTag(index, json_kind(tag))

    try:
        provisioner_type = ProvisionerType.from_tag(tag)
    except ValueError:
        raise UnknownVariantTag(tag, ProvisionerType.tags()) from None

    model = PROVISIONER_MODELS[provisioner_type]
    try:
        return model.model_validate(element)
    except PydanticValidationError as exc:
        raise VariantShapeError(index, tag, exc) from exc


def decode_provisioner_list(value: Any) -> list[Provisioner]:
    """Decode a JSON array of tagged provisioner objects, preserving order.

    Raises:
        NotAnArray: ``value`` is not a list
        DecodeError: Any per-element failure from ``decode_provisioner``
    """
    if not isinstance(value, list):
        raise NotAnArray(json_kind(value))

    decoded = [decode_provisioner(element, index) for index, element in enumerate(value)]
    logger.debug("provisioners_decoded", extra={"count": len(decoded)})
    return decoded
