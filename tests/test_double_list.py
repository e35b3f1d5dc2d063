import operator

import pytest
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from linkedstructs.double_list import DoubleList
from linkedstructs.student import Student


def test_student_example_order():
    s1 = Student("Андрій", 18, "ІПЗ-143")
    s2 = Student("Марія", 19, "КН-141")
    s3 = Student("Олена", 17, "ІПЗ-143")
    lst = DoubleList()
    lst.insert_at_end(s1)
    lst.insert_at_beginning(s2)
    lst.insert_at_index(1, s3)
    assert list(lst) == [s2, s3, s1]
    assert len(lst) == 3
    assert s3 in lst
    assert lst[1] == s3


@pytest.mark.parametrize("items", [[], [1], [1, 2, 3, 4]])
def test_forward_and_backward_traversal(items):
    lst = DoubleList(items)
    assert list(lst) == items
    assert list(reversed(lst)) == items[::-1]
    assert lst.is_empty() == (not items)


def test_removing_from_empty_list():
    lst = DoubleList()
    for remove in (lst.remove_from_beginning, lst.remove_from_end):
        with pytest.raises(IndexError, match="List is empty!"):
            remove()
    assert list(reversed(lst)) == []


def test_out_of_range_indices():
    lst = DoubleList([1, 2, 3])
    attempts = [
        lambda: lst[3],
        lambda: lst[-1],
        lambda: lst.remove_at_index(3),
        lambda: lst.insert_at_index(-1, 0),
        lambda: lst.insert_at_index(4, 0),
    ]
    for attempt in attempts:
        with pytest.raises(IndexError, match="Index out of range"):
            attempt()
    assert list(lst) == [1, 2, 3]


def test_setitem_from_both_halves():
    lst = DoubleList([1, 2, 3, 4, 5])
    lst[0] = 10
    lst[4] = 50
    assert list(lst) == [10, 2, 3, 4, 50]
    assert next(reversed(lst)) == 50


def test_str_format():
    assert str(DoubleList()) == "List: "
    assert str(DoubleList([1, 2])) == "List: 1 2 "


def test_remove_last_element_resets_both_ends():
    lst = DoubleList([1])
    lst.remove_from_end()
    assert lst.is_empty()
    lst.insert_at_beginning(2)
    assert list(lst) == [2]
    assert list(reversed(lst)) == [2]


_indices = st.integers(min_value=-2, max_value=8)


class DoubleListModel(RuleBasedStateMachine):
    """Drives a DoubleList and a Python list side by side."""

    def __init__(self):
        super().__init__()
        self.model = []
        self.lst = DoubleList()

    @staticmethod
    def _attempt(valid, model_step, list_step):
        if valid:
            model_step()
            list_step()
        else:
            with pytest.raises(IndexError):
                list_step()

    @rule(value=st.integers())
    def push_front(self, value):
        self.model.insert(0, value)
        self.lst.insert_at_beginning(value)

    @rule(value=st.integers())
    def push_back(self, value):
        self.model.append(value)
        self.lst.insert_at_end(value)

    @rule(index=_indices, value=st.integers())
    def insert(self, index, value):
        self._attempt(
            0 <= index <= len(self.model),
            lambda: self.model.insert(index, value),
            lambda: self.lst.insert_at_index(index, value),
        )

    @rule()
    def pop_front(self):
        self._attempt(bool(self.model), lambda: self.model.pop(0), self.lst.remove_from_beginning)

    @rule()
    def pop_back(self):
        self._attempt(bool(self.model), self.model.pop, self.lst.remove_from_end)

    @rule(index=_indices)
    def remove(self, index):
        self._attempt(
            0 <= index < len(self.model),
            lambda: self.model.pop(index),
            lambda: self.lst.remove_at_index(index),
        )

    @rule(index=_indices, value=st.integers())
    def assign(self, index, value):
        self._attempt(
            0 <= index < len(self.model),
            lambda: operator.setitem(self.model, index, value),
            lambda: operator.setitem(self.lst, index, value),
        )

    @invariant()
    def matches_model(self):
        assert list(self.lst) == self.model
        assert list(reversed(self.lst)) == self.model[::-1]
        assert len(self.lst) == len(self.model)


TestDoubleListModel = DoubleListModel.TestCase