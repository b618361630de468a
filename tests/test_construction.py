"""Frame construction: make_container, make_from_rows and describe"""
import pytest

from py_frame import (
    DEFAULT_POLICY,
    FrameDescription,
    Policy,
    PyColumn,
    PyFrame,
    PyFrameTypeError,
    PyFrameValueError,
    ShapeError,
    UnequalColumnLengthError,
    describe,
    make_container,
    make_from_rows,
)


class TestMakeContainer:

    def test_from_mapping(self):
        frame = make_container({'a': [1, 2], 'b': PyColumn(['x', 'y'])})
        assert frame.names == ('a', 'b')
        assert len(frame) == 2
        assert frame.policy is DEFAULT_POLICY

    def test_mapping_column_takes_key_name(self):
        frame = make_container({'a': PyColumn([1], name='other')})
        assert frame.extract('a').value.name == 'a'

    def test_from_named_columns(self):
        frame = make_container([PyColumn([1, 2], name='a'), PyColumn([3, 4], name='b')], policy='strict')
        assert frame.names == ('a', 'b')
        assert frame.policy is Policy.STRICT

    def test_unnamed_column_rejected(self):
        with pytest.raises(PyFrameTypeError):
            make_container([PyColumn([1, 2])])

    def test_unequal_lengths(self):
        with pytest.raises(UnequalColumnLengthError):
            make_container({'a': [1, 2, 3], 'b': [1, 2]})

    def test_unequal_lengths_is_value_error(self):
        with pytest.raises(ValueError):
            make_container({'a': [1, 2, 3], 'b': [1]})

    def test_duplicate_names(self):
        with pytest.raises(PyFrameValueError):
            make_container([PyColumn([1], name='a'), PyColumn([2], name='a')])

    def test_non_string_name(self):
        with pytest.raises(PyFrameTypeError):
            make_container({1: [1, 2]})

    def test_unknown_policy(self):
        with pytest.raises(PyFrameValueError):
            make_container({'a': [1]}, policy='lenient')

    def test_policy_string_case(self):
        assert make_container({'a': [1]}, policy='STRICT').policy is Policy.STRICT

    def test_empty(self):
        frame = make_container({})
        assert frame.size() == (0, 0)

    def test_equality(self):
        assert make_container({'a': [1]}) == PyFrame({'a': [1]})
        assert make_container({'a': [1]}, 'strict') != make_container({'a': [1]}, 'legacy')


class TestMakeFromRows:

    def test_letters_numbers(self):
        frame = make_from_rows(['letters', 'numbers'], ['a', 1, 'b', 2, 'c', 3])
        assert len(frame) == 3
        assert frame.policy is Policy.STRICT
        assert frame.names == ('letters', 'numbers')
        assert list(frame.extract('letters').value) == ['a', 'b', 'c']
        assert list(frame.extract('numbers').value) == [1, 2, 3]
        assert describe(frame).kinds == (str, int)

    def test_binary_values_are_text(self):
        frame = make_from_rows(['b', 'n'], [b'x', 1, b'y', 2])
        assert describe(frame).kinds == (str, int)
        assert list(frame.extract('b').value) == ["b'x'", "b'y'"]

    def test_shape_error(self):
        with pytest.raises(ShapeError):
            make_from_rows(['letters', 'numbers'], ['a', 1, 'b', 2, 'c'])

    def test_shape_error_is_value_error(self):
        with pytest.raises(ValueError):
            make_from_rows(['a', 'b', 'c'], [1, 2])

    def test_no_names(self):
        with pytest.raises(ShapeError):
            make_from_rows([], [])

    def test_tilde_tokens(self):
        frame = make_from_rows(['~x', '~ y'], [1, 2])
        assert frame.names == ('x', 'y')

    def test_empty_token(self):
        with pytest.raises(PyFrameValueError):
            make_from_rows(['~'], [1])

    def test_duplicate_tokens(self):
        with pytest.raises(PyFrameValueError):
            make_from_rows(['~x', 'x'], [1, 2])

    def test_numeric_widening(self):
        frame = make_from_rows(['n'], [1, 2.5, True])
        col = frame.extract('n').value
        assert col.kind is float
        assert list(col) == [1.0, 2.5, 1.0]

    def test_non_numeric_forces_text(self):
        col = make_from_rows(['mixed'], [1, 'a', 2.5]).extract('mixed').value
        assert col.kind is str
        assert list(col) == ['1', 'a', '2.5']

    def test_none_is_nullable(self):
        col = make_from_rows(['n'], [1, None]).extract('n').value
        assert col.dtype.nullable
        assert list(col) == [1, None]

    def test_zero_rows(self):
        frame = make_from_rows(['a', 'b'], [])
        assert frame.size() == (0, 2)

    def test_always_strict(self):
        frame = PyFrame.from_rows(['a'], [1, 2])
        assert frame.policy is Policy.STRICT
        assert frame.assign('b', [1]).policy is Policy.STRICT


class TestDescribe:

    def test_fields(self, legacy_frame):
        desc = describe(legacy_frame)
        assert isinstance(desc, FrameDescription)
        assert desc.names == ('letters_lower', 'letters_upper', 'values')
        assert desc.kinds == (str, str, int)
        assert desc.row_count == 26
        assert desc.policy is Policy.LEGACY

    def test_subset_inherits_policy(self, strict_frame):
        assert describe(strict_frame[['values']]).policy is Policy.STRICT

    def test_not_a_frame(self):
        with pytest.raises(PyFrameTypeError):
            describe({'a': [1]})
