"""Builds attribute descriptor records for category listings."""

from typing import Any

from occi_render.domain.models import Attribute


class AttributeDescriptorBuilder:
    """Projects attribute metadata onto ``{mutable, required, type, range, default}``."""

    @staticmethod
    def build(attribute: Attribute) -> dict[str, Any]:
        return {
            'mutable': attribute.mutable,
            'required': attribute.required,
            'type': attribute.type,
            'range': attribute.range,
            'default': attribute.default,
        }

    @classmethod
    def build_all(cls, attributes: dict[str, Attribute]) -> dict[str, dict[str, Any]]:
        """Name → descriptor, one entry per declared attribute, order preserved."""
        return {name: cls.build(attribute) for name, attribute in attributes.items()}
