from collections.abc import Iterator
from typing import Any, TypeVar

import attr
from typing_extensions import Unpack

from kwlist.lang.interfaces import ILispObject, IMapEntry
from kwlist.lang.obj import PrintSettings, seq_lrepr

K = TypeVar("K")
V = TypeVar("V")


@attr.frozen(eq=False, repr=False)
class Entry(IMapEntry[K, V], ILispObject):
    """A single key/value pair of a keyword list.

    Entries unpack like a 2-tuple and compare equal to any 2-tuple with equal
    elements, so ``[(k, v), ...]`` literals may be compared against the entries of
    a keyword list directly."""

    _key: K
    _value: V

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> V:
        return self._value

    def __iter__(self) -> Iterator[Any]:
        yield self._key
        yield self._value

    def __len__(self) -> int:
        return 2

    def __getitem__(self, i: int) -> Any:
        return (self._key, self._value)[i]

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, Entry):
            return (self._key, self._value) == (other._key, other._value)
        if isinstance(other, tuple):
            return (self._key, self._value) == other
        return NotImplemented

    def __hash__(self):
        return hash((self._key, self._value))

    def _lrepr(self, **kwargs: Unpack[PrintSettings]) -> str:
        return seq_lrepr((self._key, self._value), "[", "]", **kwargs)

    @staticmethod
    def of(k: K, v: V) -> "Entry[K, V]":
        return Entry(k, v)

    @staticmethod
    def from_pair(pair: Any) -> "Entry":
        """Return an Entry from any 2-element iterable.

        Raise a ValueError if `pair` does not have exactly two elements and a
        TypeError if it is not iterable at all."""
        if isinstance(pair, Entry):
            return pair
        k, v = pair
        return Entry(k, v)
