"""Buckets categories into the ``categories`` / ``mixins`` / ``kinds`` listing."""

import logging
from typing import Iterable

from occi_render.domain.constants import VARIANT_TO_COLLECTION
from occi_render.domain.models import Category
from occi_render.output.category_builder import CategoryHashBuilder
from occi_render.output.render_document import RenderDocument

logger = logging.getLogger(__name__)


class CategoryCollectionClassifier:
    """Files each category under the collection for its variant.

    Every category is rendered in full form and prepended to its own
    collection; the three collections accumulate independently of each
    other. All three keys are present after a run, possibly empty.
    """

    def classify(self, categories: Iterable[Category], document: RenderDocument) -> RenderDocument:
        for key in VARIANT_TO_COLLECTION.values():
            document.ensure_collection(key)

        count = 0
        for category in categories:
            key = VARIANT_TO_COLLECTION[category.variant]
            document.prepend(key, CategoryHashBuilder.build_full(category))
            count += 1

        logger.debug("Classified %d categories", count)
        return document
