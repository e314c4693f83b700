"""Tests for AttributeDescriptorBuilder."""

from occi_render.domain.models import Attribute
from occi_render.output.attribute_builder import AttributeDescriptorBuilder


class TestAttributeDescriptorBuilder:
    """Tests for attribute metadata projection."""

    def test_build_projects_all_fields(self):
        attribute = Attribute(mutable=False, required=True, type='integer', range='0-4095', default=7)
        assert AttributeDescriptorBuilder.build(attribute) == {
            'mutable': False,
            'required': True,
            'type': 'integer',
            'range': '0-4095',
            'default': 7,
        }

    def test_build_defaults(self):
        result = AttributeDescriptorBuilder.build(Attribute())
        assert result == {'mutable': True, 'required': False, 'type': 'string', 'range': '', 'default': None}

    def test_required_without_type_is_not_validated(self):
        """Inconsistent descriptors are projected as-is."""
        result = AttributeDescriptorBuilder.build(Attribute(required=True, type=''))
        assert result['required'] is True
        assert result['type'] == ''

    def test_build_all_keys_by_name_in_order(self):
        attributes = {
            'b.second': Attribute(type='float'),
            'a.first': Attribute(type='integer'),
        }
        result = AttributeDescriptorBuilder.build_all(attributes)
        assert list(result) == ['b.second', 'a.first']
        assert result['a.first']['type'] == 'integer'

    def test_build_all_empty(self):
        assert AttributeDescriptorBuilder.build_all({}) == {}
