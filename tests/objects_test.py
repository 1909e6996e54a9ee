"""Tests for commons.objects, commons.asserts, commons.value_maps and commons.content_types."""

import pytest

from commons import asserts, content_types, objects, value_maps
from introspection.exceptions import InvalidArgumentError
from tests.beans import Employee, Person


class TestObjects:
    """Emptiness, equality and list conversion."""

    @pytest.mark.parametrize('value', [None, '', b'', [], (), set(), {}])
    def test_empty(self, value) -> None:
        assert objects.is_empty(value)

    @pytest.mark.parametrize('value', ['a', [None], {'k': 1}, 0, False, object()])
    def test_not_empty(self, value) -> None:
        assert not objects.is_empty(value)

    def test_null_safe_equals(self) -> None:
        assert objects.null_safe_equals(None, None)
        assert not objects.null_safe_equals(None, 'a')
        assert not objects.null_safe_equals('a', None)
        assert objects.null_safe_equals('a', 'a')
        assert objects.null_safe_equals([1, (2, 3)], (1, [2, 3]))
        assert not objects.null_safe_equals([1, 2], [1, 2, 3])

    def test_to_object_list(self) -> None:
        assert objects.to_object_list(None) == []
        assert objects.to_object_list((1, 2)) == [1, 2]
        assert objects.to_object_list(range(3)) == [0, 1, 2]
        assert objects.to_object_list(b'ab') == [97, 98]

    @pytest.mark.parametrize('value', ['text', 42, {'a': 1}])
    def test_to_object_list_rejects_non_sequences(self, value) -> None:
        with pytest.raises(ValueError, match='Source is not an array'):
            objects.to_object_list(value)


class TestAsserts:
    """Argument assertions."""

    def test_passing_assertions(self) -> None:
        asserts.is_true(1 < 2)
        asserts.has_length(' ')
        asserts.has_text(' x ')
        asserts.not_empty([0])
        asserts.not_none(0)
        asserts.is_instance_of(Person, Employee())

    def test_is_true(self) -> None:
        with pytest.raises(InvalidArgumentError, match='must be positive'):
            asserts.is_true(False, 'Count must be positive')

    @pytest.mark.parametrize('text', [None, ''])
    def test_has_length(self, text) -> None:
        with pytest.raises(InvalidArgumentError):
            asserts.has_length(text)

    @pytest.mark.parametrize('text', [None, '', '   '])
    def test_has_text(self, text) -> None:
        with pytest.raises(InvalidArgumentError):
            asserts.has_text(text)

    def test_not_empty_and_not_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            asserts.not_empty({})
        with pytest.raises(InvalidArgumentError):
            asserts.not_none(None)

    def test_is_instance_of(self) -> None:
        with pytest.raises(InvalidArgumentError, match=r'Bad bean Object of class \[Person\] must be an instance of Employee'):
            asserts.is_instance_of(Employee, Person(), 'Bad bean')
        with pytest.raises(InvalidArgumentError, match='must not be None'):
            asserts.is_instance_of(None, Person())

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            asserts.not_none(None)


class TestValueMaps:
    """Dotted parameter keys to nested dictionaries."""

    def test_nesting_and_unwrapping(self) -> None:
        flat = {'user.name': 'sam', 'user.role.id': ['1'], 'page': ['2', '3'], 'empty': []}
        assert value_maps.inheritable_params(flat) == {
            'user': {'name': 'sam', 'role': {'id': '1'}},
            'page': ['2', '3'],
            'empty': None,
        }

    def test_later_key_wins(self) -> None:
        assert value_maps.inheritable_params({'user': 'x', 'user.id': '1'}) == {'user': {'id': '1'}}
        assert value_maps.inheritable_params({'user.id': '1', 'user': 'x'}) == {'user': 'x'}

    @pytest.mark.parametrize('flat', [None, {}])
    def test_empty_input(self, flat) -> None:
        assert value_maps.inheritable_params(flat) == {}


class TestContentTypes:
    """Extension lookup."""

    @pytest.mark.parametrize('extension, expected', [
        ('jpg', 'image/jpeg'),
        ('.PNG', 'image/png'),
        ('amr', 'audio/amr'),
        ('html', 'text/html'),
    ])
    def test_known_extensions(self, extension, expected) -> None:
        assert content_types.get(extension) == expected

    def test_unknown_extension(self) -> None:
        assert content_types.get('nosuchext') is None
        assert content_types.get('nosuchext', content_types.DEFAULT_CONTENT_TYPE) == 'application/octet-stream'
        assert content_types.get('  ') is None
