import pytest

from pushswap.stacks import Stacks


def test_initial_state():
    stacks = Stacks([3, 1, 2])
    assert list(stacks.a) == [3, 1, 2]
    assert list(stacks.b) == []
    assert stacks.operations == []


def test_rotate_a_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.rotate("a")
    assert list(stacks.a) == [2, 3, 1]
    assert stacks.operations == ["ra"]


def test_rotate_both():
    stacks = Stacks([1, 2, 3])
    stacks.push("b")
    stacks.push("b")
    stacks.rotate("r")
    assert list(stacks.a) == [3]
    assert list(stacks.b) == [1, 2]
    assert stacks.operations == ["pb", "pb", "rr"]


def test_reverse_rotate_a_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.reverse_rotate("a")
    assert list(stacks.a) == [3, 1, 2]
    assert stacks.operations == ["rra"]


def test_reverse_rotate_undoes_rotate():
    stacks = Stacks([5, 4, 3, 2, 1])
    stacks.rotate("a")
    stacks.reverse_rotate("a")
    assert list(stacks.a) == [5, 4, 3, 2, 1]


def test_reverse_rotate_both_name():
    stacks = Stacks([1, 2])
    stacks.push("b")
    stacks.reverse_rotate("r")
    assert stacks.operations[-1] == "rrr"


def test_push_moves_top_between_stacks():
    stacks = Stacks([1, 2, 3])
    stacks.push("b")
    stacks.push("b")
    assert list(stacks.a) == [3]
    assert list(stacks.b) == [2, 1]
    stacks.push("a")
    assert list(stacks.a) == [2, 3]
    assert list(stacks.b) == [1]
    assert stacks.operations == ["pb", "pb", "pa"]


def test_push_last_element_empties_source():
    stacks = Stacks([7])
    stacks.push("b")
    assert list(stacks.a) == []
    assert list(stacks.b) == [7]


def test_push_from_empty_raises():
    stacks = Stacks([1])
    with pytest.raises(IndexError):
        stacks.push("a")


def test_swap_a():
    stacks = Stacks([1, 2, 3])
    stacks.swap("a")
    assert list(stacks.a) == [2, 1, 3]
    assert stacks.operations == ["sa"]


def test_swap_two_elements():
    stacks = Stacks([9, 8])
    stacks.swap("a")
    assert list(stacks.a) == [8, 9]


def test_swap_single_element_is_unchanged():
    stacks = Stacks([4])
    stacks.swap("a")
    assert list(stacks.a) == [4]
    assert stacks.operations == ["sa"]


def test_swap_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.push("b")
    stacks.push("b")
    stacks.swap("s")
    assert list(stacks.a) == [4, 3]
    assert list(stacks.b) == [1, 2]
    assert stacks.operations[-1] == "ss"


def test_swap_twice_is_identity():
    stacks = Stacks([3, 1, 2])
    stacks.swap("a")
    stacks.swap("a")
    assert list(stacks.a) == [3, 1, 2]


@pytest.mark.parametrize("method", ["rotate", "reverse_rotate", "swap"])
def test_operation_on_empty_stack_raises(method):
    stacks = Stacks([1, 2])
    with pytest.raises(IndexError):
        getattr(stacks, method)("b")
    assert stacks.operations == []


@pytest.mark.parametrize("method", ["rotate", "reverse_rotate", "swap", "push"])
def test_unknown_selector_raises(method):
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        getattr(stacks, method)("x")
    assert stacks.operations == []
    assert list(stacks.a) == [1, 2]
    assert list(stacks.b) == []


def test_is_sorted_true_for_ordered_ranks():
    assert Stacks([0, 1, 2, 3]).is_sorted() is True


def test_is_sorted_false_when_out_of_order():
    assert Stacks([1, 0, 2]).is_sorted() is False


def test_is_sorted_false_when_b_not_empty():
    stacks = Stacks([0, 1, 2])
    stacks.push("b")
    assert stacks.is_sorted() is False