import pytest

from pushswap.chain import Chain, Link


def test_init_keeps_order():
    items = [3, 1, 2]
    assert list(Chain(items)) == items


def test_empty_chain():
    chain = Chain()
    assert len(chain) == 0
    assert list(chain) == []
    assert chain.last() is None
    assert chain.head is None


def test_len_matches_items():
    items = ["a", "b", "c", "d"]
    assert len(Chain(items)) == len(items)


def test_add_front_puts_first():
    chain = Chain([2, 3])
    link = chain.add_front(1)
    assert chain.head is link
    assert list(chain) == [1, 2, 3]


def test_add_back_puts_last():
    chain = Chain([1, 2])
    link = chain.add_back(3)
    assert chain.last() is link
    assert list(chain) == [1, 2, 3]


def test_add_back_on_empty_sets_head():
    chain = Chain()
    link = chain.add_back("x")
    assert chain.head is link
    assert chain.last() is link


def test_last_returns_link_with_content():
    chain = Chain(["a", "b"])
    tail = chain.last()
    assert isinstance(tail, Link)
    assert tail.content == "b"
    assert tail.next is None


def test_clear_calls_delete_in_order_and_empties():
    items = [1, 2, 3]
    chain = Chain(items)
    deleted = []
    chain.clear(deleted.append)
    assert deleted == items
    assert len(chain) == 0
    assert chain.head is None


def test_clear_without_delete_empties():
    chain = Chain([1, 2])
    chain.clear()
    assert list(chain) == []


def test_iterate_visits_each_content():
    items = ["p", "q", "r"]
    seen = []
    Chain(items).iterate(seen.append)
    assert seen == items


def test_iterate_none_does_nothing():
    chain = Chain([1])
    chain.iterate(None)
    assert list(chain) == [1]


def test_map_builds_new_chain():
    items = [1, 2, 3]
    original = Chain(items)
    mapped = original.map(str, lambda c: None)
    assert list(mapped) == [str(i) for i in items]
    assert list(original) == items
    assert mapped.head is not original.head


def test_map_failure_deletes_made_contents():
    deleted = []
    chain = Chain([1, 2, 3, 4])
    with pytest.raises(ValueError):
        chain.map(lambda c: None if c == 3 else c * 10, deleted.append)
    assert deleted == [10, 20]
    assert list(chain) == [1, 2, 3, 4]


def test_map_missing_func_raises():
    with pytest.raises(TypeError):
        Chain([1]).map(None, lambda c: None)


def test_map_empty_gives_empty():
    assert list(Chain().map(str, lambda c: None)) == []