"""Tests for RenderDocument."""

from occi_render.output.render_document import RenderDocument


class TestRenderDocument:
    """Tests for the session document's ordering and merge contracts."""

    def test_new_document_is_empty(self):
        doc = RenderDocument()
        assert len(doc) == 0
        assert doc.to_dict() == {}

    def test_prepend_inserts_at_front(self):
        doc = RenderDocument()
        doc.prepend('collection', {'n': 1})
        doc.prepend('collection', {'n': 2})
        assert doc['collection'] == [{'n': 2}, {'n': 1}]

    def test_prepend_does_not_mutate_previous_list(self):
        doc = RenderDocument()
        doc.prepend('collection', {'n': 1})
        before = doc['collection']
        doc.prepend('collection', {'n': 2})
        assert before == [{'n': 1}]

    def test_ensure_collection_keeps_existing(self):
        doc = RenderDocument()
        doc.prepend('kinds', {'term': 'compute'})
        assert doc.ensure_collection('kinds') == [{'term': 'compute'}]
        assert doc.ensure_collection('mixins') == []
        assert 'mixins' in doc

    def test_merge_overwrites(self):
        doc = RenderDocument()
        doc.merge({'Location': '/compute/1'})
        doc.merge({'Location': '/compute/2'})
        assert doc['Location'] == '/compute/2'

    def test_merge_same_value_idempotent(self):
        once = RenderDocument()
        once.merge({'Location': '/compute/1'})
        twice = RenderDocument()
        twice.merge({'Location': '/compute/1'})
        twice.merge({'Location': '/compute/1'})
        assert once == twice

    def test_equality_with_dict(self):
        doc = RenderDocument()
        doc.merge({'a': 1})
        assert doc == {'a': 1}
        assert doc != {'a': 2}

    def test_to_dict_is_copy(self):
        doc = RenderDocument()
        doc.merge({'a': 1})
        data = doc.to_dict()
        data['b'] = 2
        assert 'b' not in doc
