"""Builds category hashes in full (listing) and short (reference) form."""

from typing import Any

from occi_render.domain.models import Category
from occi_render.output.attribute_builder import AttributeDescriptorBuilder


class CategoryHashBuilder:
    """Renders categories as flat records.

    The full form is used when a category is listed on its own; the short
    form whenever an entity refers to one of its categories.
    """

    @staticmethod
    def build_full(category: Category) -> dict[str, Any]:
        """``{term, scheme, title, attributes?, location}``.

        ``attributes`` is omitted entirely when the category declares none.
        """
        data: dict[str, Any] = {
            'term': category.term,
            'scheme': category.scheme,
            'title': category.title,
        }
        if category.attributes:
            data['attributes'] = AttributeDescriptorBuilder.build_all(category.attributes)
        data['location'] = category.location
        return data

    @staticmethod
    def build_short(category: Category) -> dict[str, Any]:
        return {'term': category.term, 'scheme': category.scheme}
