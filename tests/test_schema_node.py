import copy

import pytest

from schema_checker.models.schema_node import (
    ABSENT,
    ATTRIBUTE_NAMES,
    SchemaNode,
    SubSchema,
    TypeName,
    union_member,
)


class TestSchemaNode:

    def test_slots_follow_document_keys(self):
        node = SchemaNode.from_mapping({
            'type': 'object',
            'patternProperties': {'^a': {}},
            'additionalProperties': False,
            'divisibleBy': 2,
            'required': None,
        })
        assert node.type == 'object'
        assert node.pattern_properties == {'^a': {}}
        assert node.additional_properties is False
        assert node.divisible_by == 2
        assert node.required is None
        assert node.items is ABSENT

    def test_extra_keys(self):
        node = SchemaNode.from_mapping({'type': 'string', 'title': 'T', 'format': 'date'})
        assert node.extra == {'title': 'T', 'format': 'date'}
        assert node.type == 'string'

    def test_get_by_document_key(self):
        node = SchemaNode.from_mapping({'minItems': 1, 'default': None})
        assert node.get('minItems') == 1
        assert node.get('default') is None
        assert node.get('maxItems') is ABSENT
        with pytest.raises(KeyError):
            node.get('min_items')

    def test_get_unknown_attribute(self):
        node = SchemaNode.from_mapping({})
        with pytest.raises(KeyError, match='title'):
            node.get('title')

    def test_source_is_not_modified(self):
        mapping = {'type': ['string', {'type': 'null'}], 'items': [{}], 'title': 'x'}
        before = copy.deepcopy(mapping)
        node = SchemaNode.from_mapping(mapping)
        assert mapping == before
        assert node.raw is mapping

    def test_absent_is_falsy_singleton(self):
        assert not ABSENT
        assert type(ABSENT)() is ABSENT
        assert repr(ABSENT) == 'ABSENT'

    def test_recognised_attributes(self):
        assert {'type', 'disallow', 'additionalItems', 'exclusiveMaximum', 'default'} <= ATTRIBUTE_NAMES
        assert 'title' not in ATTRIBUTE_NAMES


class TestUnionMember:

    def test_variants(self):
        assert union_member('string') == TypeName('string')
        schema = {'type': 'number'}
        member = union_member(schema)
        assert isinstance(member, SubSchema)
        assert member.schema is schema

    def test_invalid(self):
        assert union_member(1) is None
        assert union_member(None) is None
        assert union_member(['string']) is None
