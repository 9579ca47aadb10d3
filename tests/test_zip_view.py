"""Tests for ZipView construction and endpoints."""

import array
from collections import OrderedDict

import numpy as np
import pytest

from zipview.config import ZipViewConfig
from zipview.types.base import Access
from zipview.view import ZipView


class TestZipViewBasics:
    """Construction and borrowed references."""

    def test_holds_references_not_copies(self, equal_lists):
        a, b = equal_lists
        view = ZipView(a, b)
        assert view.first is a
        assert view.second is b
        assert view.access is Access.MUTABLE

    def test_rejects_sequences_without_positions(self):
        with pytest.raises(TypeError, match="first argument"):
            ZipView({1, 2}, [1, 2])
        with pytest.raises(TypeError, match="second argument"):
            ZipView([1, 2], (x for x in range(2)))

    def test_rejects_mappings_and_dict_views(self):
        with pytest.raises(TypeError, match="first argument"):
            ZipView({"x": 1, "y": 2}, [1, 2])
        with pytest.raises(TypeError, match="second argument"):
            ZipView([1, 2], OrderedDict([(0, "a"), (1, "b")]))
        with pytest.raises(TypeError, match="second argument"):
            ZipView([1, 2], {"x": 1}.values())

    def test_access_from_string(self, equal_lists):
        view = ZipView(*equal_lists, access="read-only")
        assert view.access is Access.READ_ONLY

    def test_invalid_access_string(self, equal_lists):
        with pytest.raises(ValueError, match="Invalid access"):
            ZipView(*equal_lists, access="sometimes")

    def test_len_is_shorter_length(self, short_long):
        assert len(ZipView(*short_long)) == 3
        assert len(ZipView(short_long[1], short_long[0])) == 3

    def test_repr(self):
        view = ZipView([1, 2], "abc")
        assert repr(view) == "ZipView(list[2], str[3], access=MUTABLE)"

    def test_does_not_mutate_sequences(self, short_long):
        a, b = short_long
        before = (list(a), list(b))
        list(ZipView(a, b).items())
        assert (a, b) == before


class TestZipViewEndpoints:
    """begin/end/cbegin/cend."""

    def test_begin_and_end_positions(self, short_long):
        view = ZipView(*short_long)
        assert [p.index for p in view.begin().positions] == [0, 0]
        assert [p.index for p in view.end().positions] == [3, 5]

    def test_mutable_endpoints(self, equal_lists):
        view = ZipView(*equal_lists)
        assert view.begin().access is Access.MUTABLE
        assert view.end().access is Access.MUTABLE

    def test_read_only_endpoints(self, equal_lists):
        view = ZipView(*equal_lists)
        assert view.cbegin().access is Access.READ_ONLY
        assert view.cend().access is Access.READ_ONLY

    def test_read_only_begin_starts_at_begin_of_both(self, short_long):
        view = ZipView(*short_long)
        assert [p.index for p in view.cbegin().positions] == [0, 0]
        assert view.cbegin() != view.cend()
        assert view.cbegin().deref() == (1, "a")

    def test_as_const_begin_and_end(self, equal_lists):
        const = ZipView(*equal_lists).as_const()
        assert const.access is Access.READ_ONLY
        assert const.begin().access is Access.READ_ONLY
        assert [p.index for p in const.begin().positions] == [0, 0]
        assert [p.index for p in const.end().positions] == [3, 3]

    def test_endpoints_recomputed_per_call(self):
        a, b = [1], [2]
        view = ZipView(a, b)
        first_end = view.end()
        a.append(3)
        b.append(4)
        assert [p.index for p in view.end().positions] == [2, 2]
        assert [p.index for p in first_end.positions] == [1, 1]
        assert view.begin() is not view.begin()

    def test_default_access_from_config(self, equal_lists):
        config = ZipViewConfig(default_access=Access.READ_ONLY)
        view = ZipView(*equal_lists, config=config)
        assert view.begin().access is Access.READ_ONLY
        assert view.as_const().access is Access.READ_ONLY


class TestZipViewSequenceKinds:
    """Sequences other than lists."""

    def test_string_and_tuple(self):
        assert list(ZipView("ab", (1, 2, 3)).items()) == [("a", 1), ("b", 2)]

    def test_array_write_through(self):
        a = array.array("i", [1, 2, 3])
        for pair in ZipView(a, [10, 20, 30]):
            pair.first += pair.second
        assert a.tolist() == [11, 22, 33]

    def test_numpy_array_write_through(self):
        a = np.zeros(4)
        b = np.arange(3)
        for pair in ZipView(a, b):
            pair.first = pair.second * 2
        np.testing.assert_array_equal(a, [0.0, 2.0, 4.0, 0.0])

    def test_tuple_rejects_write_through_mutable_pair(self):
        pair = ZipView((1, 2), [3, 4]).begin().deref()
        with pytest.raises(TypeError):
            pair.first = 0


class TestZipViewLogging:
    """Debug records emitted by the view."""

    def test_construction_and_traversal_logged(self, caplog, equal_lists):
        caplog.set_level("DEBUG", logger="zipview")
        list(ZipView(*equal_lists))
        messages = [r.getMessage() for r in caplog.records if r.name == "zipview.view"]
        assert "Created MUTABLE ZipView over list and list" in messages
        assert "ZipView traversal finished after 3 pairs" in messages
