import types

import pytest

from schema_checker import InstanceValidationError, validate_instance


class TestValidateInstance:

    def test_valid_instance(self):
        schema = {'type': 'object', 'properties': {'n': {'type': 'number'}}}
        assert validate_instance({'n': 1.5}, schema) is None

    def test_reports_location(self):
        schema = {'type': 'object', 'properties': {'n': {'type': 'number'}}}
        with pytest.raises(InstanceValidationError) as exc_info:
            validate_instance({'n': 'x'}, schema)
        assert exc_info.value.yaml_path == '/n'
        assert str(exc_info.value).endswith('(at /n)')

    def test_root_level_failure_has_no_location(self):
        with pytest.raises(InstanceValidationError) as exc_info:
            validate_instance('text', {'type': 'array'})
        assert exc_info.value.yaml_path == ''
        assert '(at' not in str(exc_info.value)

    def test_deepest_violation_is_reported(self):
        schema = {
            'type': 'object',
            'properties': {'items': {'type': 'array', 'items': {'type': 'string'}}},
            'maxLength': 0,
            'disallow': 'object',
        }
        with pytest.raises(InstanceValidationError) as exc_info:
            validate_instance({'items': ['a', 1]}, schema)
        assert exc_info.value.yaml_path == '/items/1'

    def test_draft3_required(self):
        schema = {'type': 'object', 'properties': {'id': {'type': 'integer', 'required': True}}}
        validate_instance({'id': 3}, schema)
        with pytest.raises(InstanceValidationError, match='id'):
            validate_instance({}, schema)

    def test_draft3_disallow_and_divisible_by(self):
        validate_instance(4, {'disallow': 'string', 'divisibleBy': 2})
        with pytest.raises(InstanceValidationError):
            validate_instance('4', {'disallow': 'string'})
        with pytest.raises(InstanceValidationError):
            validate_instance(5, {'divisibleBy': 2})

    @pytest.mark.parametrize('value', ['abc', 5, ['a']])
    def test_union_with_schema_member(self, value):
        schema = {'type': ['null', {'type': 'string', 'maxLength': 2}]}
        validate_instance(None, schema)
        validate_instance('ab', schema)
        with pytest.raises(InstanceValidationError, match='is not of type'):
            validate_instance(value, schema)

    def test_nested_union_with_schema_member(self):
        schema = {'type': 'object', 'properties': {'x': {'type': ['null', {'type': 'string', 'maxLength': 2}]}}}
        with pytest.raises(InstanceValidationError) as exc_info:
            validate_instance({'x': 'abc'}, schema)
        assert exc_info.value.yaml_path == '/x'

    def test_unknown_type_name(self):
        with pytest.raises(InstanceValidationError, match="unknown type 'custom'"):
            validate_instance(1, {'type': 'custom'})

    def test_pattern_that_does_not_compile(self):
        with pytest.raises(InstanceValidationError, match='pattern cannot be compiled'):
            validate_instance('a', {'pattern': '('})


class TestTypeClassification:
    """Instances are classified the same way schema attributes are."""

    def test_integral_float_is_an_integer(self):
        validate_instance(2.0, {'type': 'integer'})
        validate_instance({'n': 2.0}, {'type': 'object', 'properties': {'n': {'type': 'integer'}}})
        with pytest.raises(InstanceValidationError):
            validate_instance(2.5, {'type': 'integer'})

    def test_bool_is_not_an_integer(self):
        with pytest.raises(InstanceValidationError):
            validate_instance(True, {'type': 'integer'})

    def test_tuple_is_an_array(self):
        validate_instance(('a', 'b'), {'type': 'array', 'items': {'type': 'string'}, 'maxItems': 2})
        with pytest.raises(InstanceValidationError) as exc_info:
            validate_instance(('a', 1), {'type': 'array', 'items': {'type': 'string'}})
        assert exc_info.value.yaml_path == '/1'

    def test_any_mapping_is_an_object(self):
        value = types.MappingProxyType({'n': 1})
        validate_instance(value, {'type': 'object', 'properties': {'n': {'type': 'integer'}}})


class TestUncheckedKeywords:

    def test_dependencies(self):
        schema = {'type': 'object', 'dependencies': {'a': 'b', 'c': ['a'], 'd': {'required': True, 'type': 'object'}}}
        validate_instance({'a': 1, 'b': 2}, schema)
        with pytest.raises(InstanceValidationError, match="'b' is a dependency of 'a'"):
            validate_instance({'a': 1}, schema)

    @pytest.mark.parametrize(
        'dependencies, shown',
        [
            (5, 'an integer'),
            ({'a': 5}, 'an object'),
            ({'a': [{'b': 1}]}, 'an object'),
        ],
    )
    def test_malformed_dependencies(self, dependencies, shown):
        with pytest.raises(InstanceValidationError, match=f"schema cannot be evaluated: 'dependencies' is {shown}"):
            validate_instance({'a': 1}, {'type': 'object', 'dependencies': dependencies})

    def test_extends(self):
        schema = {'extends': [{'type': 'object'}, {'properties': {'n': {'type': 'integer'}}}]}
        validate_instance({'n': 1}, schema)
        with pytest.raises(InstanceValidationError):
            validate_instance({'n': 'x'}, schema)

    @pytest.mark.parametrize('extends', [5, [{}, 'x']])
    def test_malformed_extends(self, extends):
        with pytest.raises(InstanceValidationError, match="schema cannot be evaluated: 'extends'"):
            validate_instance({}, {'type': 'object', 'extends': extends})

    def test_local_reference(self):
        schema = {'type': 'object', 'properties': {'child': {'$ref': '#'}, 'n': {'type': 'integer'}}}
        validate_instance({'child': {'n': 1}}, schema)
        with pytest.raises(InstanceValidationError) as exc_info:
            validate_instance({'child': {'n': 'x'}}, schema)
        assert exc_info.value.yaml_path == '/child/n'

    def test_unresolvable_reference(self):
        schema = {'type': 'object', 'properties': {'a': {'$ref': '#/nope'}}}
        with pytest.raises(InstanceValidationError, match='reference cannot be resolved'):
            validate_instance({'a': 1}, schema)

    def test_reference_must_be_a_string(self):
        schema = {'type': 'object', 'properties': {'a': {'$ref': 5}}}
        with pytest.raises(InstanceValidationError, match="'\\$ref' is an integer when it should be a string"):
            validate_instance({'a': 1}, schema)

    def test_schema_id_must_be_a_string(self):
        with pytest.raises(InstanceValidationError, match="'id' is an integer when it should be a string"):
            validate_instance({}, {'type': 'object', 'id': 5})
