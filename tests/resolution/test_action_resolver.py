"""Tests for ActionReferenceResolver."""

import pytest

from occi_render.domain.models import Action, Category, Resource
from occi_render.errors import UnresolvedReferenceError
from occi_render.resolution.action_resolver import ActionReferenceResolver


ACTION_SCHEME = 'http://schemas.example.org/occi/infrastructure/compute/action#'


class TestActionReferenceResolver:
    """Tests for action reference records and invocation URIs."""

    def test_resolve_record(self, registry, compute, start_action):
        result = ActionReferenceResolver(registry).resolve(start_action, compute)
        assert result == {
            'title': 'Start',
            'uri': '/compute/7?action=start',
            'type': ACTION_SCHEME + 'start',
        }

    def test_uri_uses_registry_location(self, registry, compute, start_action):
        """The registered location wins over the entity's own location field."""
        registry.register('/vms/seven', compute)
        uri = ActionReferenceResolver(registry).action_uri(start_action, compute)
        assert uri == '/vms/seven?action=start'

    @pytest.mark.parametrize('term', ['start', 'stop', 'restart', 'suspend'])
    def test_uri_format(self, registry, compute, term):
        action = Action(Category(term, ACTION_SCHEME, title=term.title()))
        uri = ActionReferenceResolver(registry).action_uri(action, compute)
        assert uri == f'/compute/7?action={term}'

    def test_type_is_action_type_identifier(self, registry, compute, stop_action):
        result = ActionReferenceResolver(registry).resolve(stop_action, compute)
        assert result['type'] == stop_action.type_identifier == ACTION_SCHEME + 'stop'

    def test_parameters_not_rendered(self, registry, compute, stop_action):
        result = ActionReferenceResolver(registry).resolve(stop_action, compute)
        assert set(result) == {'title', 'uri', 'type'}

    def test_unregistered_resource_raises(self, registry, compute_kind, start_action):
        orphan = Resource(id='vm-x', kind=compute_kind, location='/compute/x')
        with pytest.raises(UnresolvedReferenceError) as exc_info:
            ActionReferenceResolver(registry).resolve(start_action, orphan)
        assert exc_info.value.reference is orphan
