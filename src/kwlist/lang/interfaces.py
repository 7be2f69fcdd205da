import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sized
from typing import Any, Callable, Generic, Optional, TypeVar

from typing_extensions import Self

from kwlist.lang.obj import LispObject as _LispObject

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class ICounted(Sized, ABC):
    """``ICounted`` is a marker interface for types can produce their length in
    constant time."""

    __slots__ = ()


class IMapEntry(Generic[K, V], ABC):
    """``IMapEntry`` values are produced by iterating over any
    :py:class:`IAssociative` (such as a keyword list)."""

    __slots__ = ()

    @property
    @abstractmethod
    def key(self) -> K:
        raise NotImplementedError()

    @property
    @abstractmethod
    def value(self) -> V:
        raise NotImplementedError()


class INamed(ABC):
    """``INamed`` instances are symbolic identifiers with a name and optional
    namespace."""

    __slots__ = ()

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError()

    @property
    @abstractmethod
    def ns(self) -> Optional[str]:
        raise NotImplementedError()

    @classmethod
    @abstractmethod
    def with_name(cls, name: str, ns: Optional[str] = None) -> Self:
        """Create a new instance of this INamed with `name` and optional `ns`."""
        raise NotImplementedError()


ILispObject = _LispObject


class ILookup(Generic[K, V], ABC):
    """``ILookup`` types allow accessing contained values by a key."""

    __slots__ = ()

    @abstractmethod
    def val_at(self, k: K, default: Optional[V] = None) -> Optional[V]:
        raise NotImplementedError()


ReduceKVFunction = Callable[[T, K, V], T]


class IReduceKV(ABC):
    """``IReduceKV`` types define custom implementations of ``reduce-kv``, folding
    over their key-value pairs in order."""

    __slots__ = ()

    @abstractmethod
    def reduce_kv(self: Self, f: ReduceKVFunction, init: T):
        raise NotImplementedError()


class IAssociative(ILookup[K, V], Iterable[IMapEntry[K, V]]):
    """``IAssociative`` types support a persistent data structure variant of
    associative operations. None of these operations modify the receiver."""

    __slots__ = ()

    @abstractmethod
    def put(self: Self, k: K, v: V) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def delete(self: Self, k: K) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def contains(self, k: K) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def entry(self, k: K) -> Optional[IMapEntry[K, V]]:
        raise NotImplementedError()

    @abstractmethod
    def empty(self: Self) -> Self:
        raise NotImplementedError()


class IOrderedAssociative(ICounted, IAssociative[K, V], IReduceKV):
    """``IOrderedAssociative`` types hold their entries sorted by key with no
    duplicate keys, and can merge with another such collection without resorting
    either input."""

    __slots__ = ()

    @abstractmethod
    def __iter__(self) -> Iterator[IMapEntry[K, V]]:
        raise NotImplementedError()

    @abstractmethod
    def keys(self) -> list[K]:
        raise NotImplementedError()

    @abstractmethod
    def values(self) -> list[V]:
        raise NotImplementedError()

    @abstractmethod
    def merge(
        self: Self,
        other: Self,
        resolver: Optional[Callable[[K, V, V], V]] = None,
    ) -> Self:
        raise NotImplementedError()


def seq_equals(s1: Iterable, s2: Any) -> bool:
    """Return True if two sequences contain exactly the same elements in the same
    order. Return False if one sequence is shorter than the other."""
    sentinel = object()
    for e1, e2 in itertools.zip_longest(s1, s2, fillvalue=sentinel):
        if bool(e1 is sentinel) or bool(e2 is sentinel):
            return False
        if e1 != e2:
            return False
    return True
