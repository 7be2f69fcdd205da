import pickle

import pytest

from kwlist.lang.entry import Entry
from kwlist.lang.interfaces import ILispObject, IMapEntry
from kwlist.lang.keyword import keyword


@pytest.mark.parametrize("interface", [ILispObject, IMapEntry])
def test_entry_interface_membership(interface):
    assert isinstance(Entry.of(keyword("a"), 1), interface)
    assert issubclass(Entry, interface)


def test_entry_key_and_value():
    entry = Entry.of(keyword("a"), 1)
    assert keyword("a") == entry.key
    assert 1 == entry.value
    assert keyword("a") == entry[0]
    assert 1 == entry[1]
    assert 2 == len(entry)

    k, v = entry
    assert keyword("a") == k
    assert 1 == v


def test_entry_is_immutable():
    entry = Entry.of(keyword("a"), 1)
    with pytest.raises(AttributeError):
        entry.value = 2  # type: ignore[misc]


def test_entry_equals():
    assert Entry.of(keyword("a"), 1) == Entry.of(keyword("a"), 1)
    assert Entry.of(keyword("a"), 1) == (keyword("a"), 1)
    assert (keyword("a"), 1) == Entry.of(keyword("a"), 1)
    assert Entry.of(keyword("a"), 1) != Entry.of(keyword("a"), 2)
    assert Entry.of(keyword("a"), 1) != (keyword("a"), 1, 2)
    assert Entry.of(keyword("a"), 1) != [keyword("a"), 1]
    assert hash(Entry.of(keyword("a"), 1)) == hash((keyword("a"), 1))


def test_entry_from_pair():
    entry = Entry.of(keyword("a"), 1)
    assert entry is Entry.from_pair(entry)
    assert entry == Entry.from_pair((keyword("a"), 1))
    assert entry == Entry.from_pair([keyword("a"), 1])

    with pytest.raises(ValueError):
        Entry.from_pair((keyword("a"),))

    with pytest.raises(TypeError):
        Entry.from_pair(None)


def test_entry_repr():
    assert "[:a 1]" == repr(Entry.of(keyword("a"), 1))
    assert '[:ns/a "s"]' == repr(Entry.of(keyword("a", ns="ns"), "s"))


def test_entry_pickleability(pickle_protocol: int):
    entry = Entry.of(keyword("a"), [1, 2])
    assert entry == pickle.loads(pickle.dumps(entry, protocol=pickle_protocol))
