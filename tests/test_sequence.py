"""Tests for the immutable Sequence collection."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ferrum import Err, IndexOutOfBounds, Integer, Nothing, Ok, Ordering, Pair, Sequence, Set, Some
from tests.strategies import int_lists, sequences, small_integers


class MatchesOne:
    """Unhashable value that compares equal to the int 1."""

    __hash__ = None

    def __eq__(self, other):
        return isinstance(other, MatchesOne) or other == 1


class TestSequenceCreation:
    """Tests for the constructors and backing-store validation."""

    def test_of(self):
        assert Sequence.of(1, 2, 3).to_array() == [1, 2, 3]

    def test_of_array_copies(self):
        source = [1, 2]
        seq = Sequence.of_array(source)
        source.append(3)
        assert seq.to_array() == [1, 2]

    def test_of_array_accepts_generators(self):
        assert Sequence.of_array(x * x for x in range(3)) == Sequence.of(0, 1, 4)

    def test_new_and_clear(self, numbers):
        assert Sequence.new().is_empty()
        assert numbers.clear() == Sequence.new()
        assert numbers.size() == 5

    def test_requires_tuple(self):
        with pytest.raises(TypeError, match='use Sequence.of_array'):
            Sequence([1, 2])  # type: ignore[arg-type]

    def test_frozen(self, numbers):
        with pytest.raises(AttributeError):
            numbers.items = ()  # type: ignore[misc]

    def test_to_array_is_fresh(self, numbers):
        array = numbers.to_array()
        array.clear()
        assert numbers.size() == 5

    def test_str(self):
        assert str(Sequence.new()) == 'Sequence<>'
        assert str(Sequence.of(1)) == 'Sequence<int>'


class TestSequenceQuery:
    """Tests for size, lookups and predicates."""

    def test_size_and_len(self, numbers):
        assert numbers.size() == 5
        assert len(numbers) == 5
        assert numbers.len() == Integer(5)

    def test_contains(self, numbers):
        assert numbers.contains(4)
        assert not numbers.contains(9)
        assert 4 in numbers

    def test_get(self):
        seq = Sequence.of('a', 'b', 'c')
        assert seq.get(0) == Ok('a')
        assert seq.get(2) == Ok('c')

    def test_get_out_of_bounds(self):
        seq = Sequence.of('a', 'b', 'c')
        assert seq.get(3) == Err(IndexOutOfBounds(3, 3))
        assert seq.get(-1) == Err(IndexOutOfBounds(-1, 3))
        assert Sequence.new().get(0).is_err()

    def test_first_and_last(self, numbers):
        assert numbers.first() == Some(3)
        assert numbers.last() == Some(5)
        assert Sequence.new().first() is Nothing
        assert Sequence.new().last() is Nothing

    def test_find(self, numbers):
        assert numbers.find(lambda x: x > 3) == Some(4)
        assert numbers.find(lambda x: x > 10) == Nothing

    def test_find_map(self):
        seq = Sequence.of('x', '12', '7')
        assert seq.find_map(lambda s: Some(int(s)) if s.isdigit() else Nothing) == Some(12)

    def test_index_of(self, numbers):
        assert numbers.index_of(1) == Some(1)
        assert numbers.index_of(9) == Nothing

    def test_any_short_circuits(self):
        seen = []

        def check(x):
            seen.append(x)
            return x == 2

        assert Sequence.of(1, 2, 3, 4).any(check)
        assert seen == [1, 2]

    def test_all(self, numbers):
        assert numbers.all(lambda x: x > 0)
        assert not numbers.all(lambda x: x > 1)
        assert Sequence.new().all(lambda x: False)

    def test_eq_is_order_dependent(self):
        assert Sequence.of(1, 2).eq(Sequence.of(1, 2))
        assert not Sequence.of(1, 2).eq(Sequence.of(2, 1))
        assert Sequence.of(1, 2) != Sequence.of(2, 1)


class TestSequenceEdits:
    """Tests for operations that return a modified copy."""

    def test_add_does_not_mutate(self, numbers):
        extended = numbers.add(9)
        assert extended.last() == Some(9)
        assert numbers.size() == 5

    def test_insert_at(self):
        seq = Sequence.of(1, 3)
        assert seq.insert_at(1, 2) == Ok(Sequence.of(1, 2, 3))
        assert seq.insert_at(0, 0) == Ok(Sequence.of(0, 1, 3))
        assert seq.insert_at(2, 4) == Ok(Sequence.of(1, 3, 4))
        assert seq.insert_at(3, 4) == Err(IndexOutOfBounds(3, 2))

    def test_remove_drops_every_match(self, numbers):
        assert numbers.remove(1) == Sequence.of(3, 4, 5)
        assert numbers.remove(9) == numbers

    def test_remove_agrees_with_contains_for_nan(self):
        nan = float('nan')
        seq = Sequence.of(1.0, nan)
        assert seq.contains(nan)
        assert not seq.remove(nan).contains(nan)
        assert seq.remove(nan).to_array() == [1.0]

    def test_remove_at(self, numbers):
        assert numbers.remove_at(1) == Ok(Sequence.of(3, 4, 1, 5))
        assert numbers.remove_at(5) == Err(IndexOutOfBounds(5, 5))

    def test_swap(self):
        seq = Sequence.of('a', 'b', 'c')
        assert seq.swap(0, 2) == Ok(Sequence.of('c', 'b', 'a'))
        assert seq.swap(1, 1) == Ok(seq)
        assert seq.swap(0, 3) == Err(IndexOutOfBounds(3, 3))

    def test_append(self):
        assert Sequence.of(1).append(Sequence.of(2, 3)) == Sequence.of(1, 2, 3)


class TestSequenceTransforms:
    """Tests for filter, map, flatten, fold and the slicing helpers."""

    def test_filter_and_map(self, numbers):
        assert numbers.filter(lambda x: x > 2) == Sequence.of(3, 4, 5)
        assert numbers.map(str) == Sequence.of('3', '1', '4', '1', '5')

    def test_flat_map(self):
        assert Sequence.of(1, 2).flat_map(lambda x: [x, x * 10]) == Sequence.of(1, 10, 2, 20)

    def test_flatten_one_level(self):
        nested = Sequence.of(Sequence.of(1, 2), [3], (4, [5]), 6)
        assert nested.flatten() == Sequence.of(1, 2, 3, 4, [5], 6)

    def test_flatten_keeps_strings_whole(self):
        assert Sequence.of('ab', ['cd']).flatten() == Sequence.of('ab', 'cd')

    def test_flatten_spreads_sets(self):
        assert Sequence.of(Set.of(1, 2), 3).flatten() == Sequence.of(1, 2, 3)

    def test_filter_map(self):
        seq = Sequence.of('1', 'x', '3')
        assert seq.filter_map(lambda s: Some(int(s)) if s.isdigit() else Nothing) == Sequence.of(1, 3)

    def test_fold(self, numbers):
        assert numbers.fold(lambda acc, x: acc + x, 0) == 14
        assert Sequence.of('a', 'b').fold(lambda acc, x: acc + x, '>') == '>ab'
        assert Sequence.new().fold(lambda acc, x: acc + x, 7) == 7

    def test_unique_keeps_first_occurrence(self):
        assert Sequence.of(3, 1, 3, 2, 1).unique() == Sequence.of(3, 1, 2)

    def test_unique_handles_unhashable(self):
        assert Sequence.of([1], [2], [1]).unique() == Sequence.of([1], [2])

    def test_unique_matches_across_hashable_and_unhashable(self):
        assert Sequence.of(1, MatchesOne()).unique() == Sequence.of(1)
        assert Sequence.of(MatchesOne(), 1, 2).unique().size() == 2

    def test_reverse(self, numbers):
        assert numbers.reverse() == Sequence.of(5, 1, 4, 1, 3)

    def test_take_and_skip(self, numbers):
        assert numbers.take(2) == Sequence.of(3, 1)
        assert numbers.skip(3) == Sequence.of(1, 5)
        assert numbers.take(-1) == Sequence.new()
        assert numbers.skip(-1) == numbers
        assert numbers.take(99) == numbers
        assert numbers.truncate(1) == Sequence.of(3)

    def test_take_while_and_skip_while(self):
        seq = Sequence.of(1, 2, 5, 1)
        assert seq.take_while(lambda x: x < 3) == Sequence.of(1, 2)
        assert seq.skip_while(lambda x: x < 3) == Sequence.of(5, 1)
        assert seq.take_while(lambda x: True) == seq

    def test_resize(self):
        seq = Sequence.of(1, 2, 3)
        assert seq.resize(2, 0) == Sequence.of(1, 2)
        assert seq.resize(5, 0) == Sequence.of(1, 2, 3, 0, 0)
        assert seq.resize(-1, 0) == Sequence.new()

    def test_windows(self):
        assert Sequence.of(1, 2, 3).windows(2) == Sequence.of(Sequence.of(1, 2), Sequence.of(2, 3))
        assert Sequence.of(1, 2).windows(3) == Sequence.new()
        assert Sequence.of(1, 2).windows(0) == Sequence.new()

    def test_zip_stops_at_shorter(self):
        zipped = Sequence.of(1, 2, 3).zip(Sequence.of('a', 'b'))
        assert zipped == Sequence.of(Pair(1, 'a'), Pair(2, 'b'))
        assert zipped.map(Pair.to_tuple).to_array() == [(1, 'a'), (2, 'b')]

    def test_sort(self, numbers):
        assert numbers.sort() == Sequence.of(1, 1, 3, 4, 5)

    def test_sort_rejects_incomparable(self):
        with pytest.raises(TypeError):
            Sequence.of(1, 'a').sort()

    def test_sort_by_comparator(self):
        seq = Sequence.of(Integer(3), Integer(-1), Integer(2))
        assert seq.sort_by(Integer.cmp) == Sequence.of(Integer(-1), Integer(2), Integer(3))
        descending = seq.sort_by(lambda a, b: a.cmp(b).reverse())
        assert descending.map(Integer.to_int).to_array() == [3, 2, -1]

    def test_sort_by_is_stable(self):
        words = Sequence.of('bb', 'a', 'cc', 'd')
        by_length = words.sort_by(lambda a, b: Ordering.of(len(a), len(b)))
        assert by_length == Sequence.of('a', 'd', 'bb', 'cc')


class TestSequenceConsumption:
    """Tests for iteration and conversion."""

    def test_for_each_in_order(self, numbers):
        seen = []
        assert numbers.for_each(seen.append) is None
        assert seen == [3, 1, 4, 1, 5]

    def test_iter(self, numbers):
        assert list(numbers.iter()) == [3, 1, 4, 1, 5]
        assert list(numbers) == [3, 1, 4, 1, 5]

    def test_to_set(self, numbers):
        assert numbers.to_set() == Set.of(3, 1, 4, 5)


class TestSequenceProperties:
    """Property-based tests for Sequence laws."""

    @given(sequences)
    def test_filter_output_satisfies_predicate(self, seq):
        assert seq.filter(lambda x: x % 2 == 0).all(lambda x: x % 2 == 0)

    @given(sequences)
    def test_map_preserves_size(self, seq):
        assert seq.map(lambda x: x + 1).size() == seq.size()

    @given(sequences)
    def test_unique_is_idempotent(self, seq):
        assert seq.unique().unique() == seq.unique()

    @given(int_lists, int_lists)
    def test_eq_matches_list_equality(self, a, b):
        assert Sequence.of_array(a).eq(Sequence.of_array(b)) == (a == b)

    @given(sequences, small_integers)
    def test_add_never_mutates(self, seq, value):
        before = seq.to_array()
        seq.add(value)
        assert seq.to_array() == before

    @given(sequences, st.integers(min_value=-5, max_value=40))
    def test_get_agrees_with_size(self, seq, index):
        assert seq.get(index).is_ok() == (0 <= index < seq.size())

    @given(sequences)
    def test_reverse_is_involution(self, seq):
        assert seq.reverse().reverse() == seq
