import logging
from collections.abc import Iterable, Iterator
from typing import Any, Callable, Optional, TypeVar

from pyrsistent import PVector, pvector
from typing_extensions import Unpack

from kwlist.lang.entry import Entry
from kwlist.lang.exception import (
    ContractError,
    InvariantError,
    KeyContractError,
    TransformContractError,
)
from kwlist.lang.interfaces import (
    ILispObject,
    IOrderedAssociative,
    ReduceKVFunction,
    seq_equals,
)
from kwlist.lang.keyword import Keyword, keyword
from kwlist.lang.obj import PrintSettings, kv_lrepr
from kwlist.lang.reduced import Reduced
from kwlist.logconfig import TRACE

logger = logging.getLogger(__name__)

V = TypeVar("V")
T_reduce = TypeVar("T_reduce")

Resolver = Callable[[Keyword, Any, Any], Any]


def _check_key(key: Any) -> Keyword:
    if not isinstance(key, Keyword):
        raise KeyContractError(
            "Keyword list keys must be keywords",
            {"key": key, "type": type(key).__name__},
        )
    return key


def _locate(
    entries: "PVector[Entry[Keyword, Any]]", key: Keyword
) -> tuple[int, bool]:
    """Walk `entries` in key order, returning the index at which `key` is found
    (or would be inserted) and whether it was found.

    The walk stops at the first entry whose key sorts after `key`, since `key`
    cannot appear any later without breaking the ordering."""
    for i, entry in enumerate(entries):
        if key < entry.key:
            return i, False
        if key > entry.key:
            continue
        return i, True
    return len(entries), False


def _second_wins(_: Keyword, __: Any, v2: V) -> V:
    return v2


class KeywordList(IOrderedAssociative[Keyword, V], ILispObject):
    """Keyword list. A sequence of keyword/value entries kept in strictly ascending
    key order with no duplicate keys. Delegates internally to a pyrsistent.PVector
    of :py:class:`kwlist.lang.entry.Entry` objects.

    Every operation returns a new keyword list and leaves the receiver untouched.
    Do not instantiate directly. Instead use :py:func:`from_enum`, :py:func:`kl` or
    :py:func:`from_sorted` below."""

    __slots__ = ("_inner",)

    def __init__(self, entries: "PVector[Entry[Keyword, V]]") -> None:
        self._inner = entries

    def __bool__(self):
        return len(self._inner) > 0

    def __call__(self, key: Keyword, default: Optional[V] = None) -> Optional[V]:
        return self.val_at(key, default)

    def __contains__(self, item):
        if not isinstance(item, Keyword):
            return False
        return _locate(self._inner, item)[1]

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, KeywordList):
            return self._inner == other._inner
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        if len(self) != len(other):
            return False
        return seq_equals(self._inner, other)

    def __hash__(self):
        return hash(tuple(self._inner))

    def __iter__(self) -> Iterator[Entry[Keyword, V]]:
        yield from self._inner

    def __len__(self):
        return len(self._inner)

    def __reduce__(self):
        return from_sorted, (list(self._inner),)

    def _lrepr(self, **kwargs: Unpack[PrintSettings]) -> str:
        return kv_lrepr(self._inner, "[", "]", **kwargs)

    def val_at(self, k: Keyword, default: Optional[V] = None) -> Optional[V]:
        i, found = _locate(self._inner, _check_key(k))
        if found:
            return self._inner[i].value
        return default

    def entry(self, k: Keyword) -> Optional[Entry[Keyword, V]]:
        i, found = _locate(self._inner, _check_key(k))
        if found:
            return self._inner[i]
        return None

    def contains(self, k: Keyword) -> bool:
        return _locate(self._inner, _check_key(k))[1]

    def keys(self) -> list[Keyword]:
        return [entry.key for entry in self._inner]

    def values(self) -> list[V]:
        return [entry.value for entry in self._inner]

    def items(self) -> Iterator[tuple[Keyword, V]]:
        for entry in self._inner:
            yield entry.key, entry.value

    def put(self, k: Keyword, v: V) -> "KeywordList[V]":
        i, found = _locate(self._inner, _check_key(k))
        new_entry = Entry.of(k, v)
        if found:
            return KeywordList(self._inner.set(i, new_entry))
        return KeywordList(self._inner[:i].append(new_entry).extend(self._inner[i:]))

    def delete(self, k: Keyword) -> "KeywordList[V]":
        # Keys are unique, so the walk stops at the first match.
        i, found = _locate(self._inner, _check_key(k))
        if found:
            return KeywordList(self._inner.delete(i))
        return self

    def merge(
        self,
        other: "KeywordList[V]",
        resolver: Optional[Resolver] = None,
    ) -> "KeywordList[V]":
        """Merge `other` into this keyword list, returning a new keyword list.

        Both lists are walked together like two sorted runs. If both lists hold a
        key, `resolver` is called once with the key, the value from this list and
        the value from `other` (in that order), and its return value is kept. By
        default the value from `other` wins."""
        if resolver is None:
            resolver = _second_wins

        if not isinstance(other, KeywordList):
            raise ContractError(
                "Keyword lists may only be merged with other keyword lists",
                {"other": other, "type": type(other).__name__},
            )

        left, right = self._inner, other._inner
        merged = pvector().evolver()
        i = j = 0
        while i < len(left) and j < len(right):
            e1, e2 = left[i], right[j]
            if e1.key < e2.key:
                merged.append(e1)
                i += 1
            elif e1.key > e2.key:
                merged.append(e2)
                j += 1
            else:
                logger.log(TRACE, f"Resolving merge conflict on key {e1.key}")
                merged.append(Entry.of(e1.key, resolver(e1.key, e1.value, e2.value)))
                i += 1
                j += 1

        merged.extend(left[i:])
        merged.extend(right[j:])
        return KeywordList(merged.persistent())

    def empty(self) -> "KeywordList":
        return EMPTY

    def reduce_kv(self, f: ReduceKVFunction, init: T_reduce) -> T_reduce:
        for entry in self._inner:
            init = f(init, entry.key, entry.value)
            if isinstance(init, Reduced):
                return init.deref()
        return init


EMPTY: KeywordList = KeywordList(pvector())


def from_enum(
    pairs: Iterable[Any], transform: Optional[Callable[[Any], Any]] = None
) -> KeywordList:
    """Create a keyword list from an iterable of ``(key, value)`` pairs.

    Pairs are inserted from left to right with :py:func:`put`, so the entries of
    the result are sorted by key and a later pair replaces the value of an earlier
    pair with the same key.

    If `transform` is given, each element of `pairs` is passed through it first and
    it must return a ``(key, value)`` pair.

    >>> from_enum([(keyword("b"), 1), (keyword("a"), 2)])
    [:a 2 :b 1]
    >>> from_enum([keyword("a"), keyword("b")], lambda x: (x, x))
    [:a :a :b :b]"""
    acc = EMPTY
    for item in pairs:
        if transform is None:
            k, v = item
        else:
            k, v = _apply_transform(transform, item)
        size = len(acc)
        acc = acc.put(k, v)
        if len(acc) == size:
            logger.debug(f"Duplicate key {k} in keyword list source; last value wins")
    return acc


def _apply_transform(transform: Callable[[Any], Any], item: Any) -> tuple[Any, Any]:
    result = transform(item)
    try:
        k, v = result
    except (TypeError, ValueError) as e:
        raise TransformContractError(
            "Keyword list transform must return a (key, value) pair",
            {"item": item, "result": result},
        ) from e
    return k, v


def from_sorted(pairs: Iterable[Any]) -> KeywordList:
    """Adopt an iterable of ``(key, value)`` pairs which is already sorted by key
    as a keyword list without reinserting every pair.

    The sortedness invariant is verified here once, so operations on the returned
    keyword list may rely on it."""
    entries = pvector().evolver()
    prev: Optional[Keyword] = None
    for i, pair in enumerate(pairs):
        try:
            entry = Entry.from_pair(pair)
        except (TypeError, ValueError) as e:
            raise InvariantError(
                "Keyword list elements must be (key, value) pairs",
                {"index": i, "element": pair},
            ) from e
        k = _check_key(entry.key)
        if prev is not None and not prev < k:
            raise InvariantError(
                "Keyword list keys must be unique and in ascending order",
                {"index": i, "key": k, "previous": prev},
            )
        entries.append(entry)
        prev = k
    return KeywordList(entries.persistent())


def kl(**kvs) -> KeywordList:
    """Creates a new keyword list from keyword arguments, interning each argument
    name as a keyword."""
    return from_enum((keyword(k), v) for k, v in kvs.items())


def get(kwlist: KeywordList, key: Keyword, default: Any = None) -> Any:
    """Return the value stored under `key`, or `default` if `key` is absent."""
    return kwlist.val_at(key, default)


def keys(kwlist: KeywordList) -> list[Keyword]:
    """Return the keys of `kwlist` in ascending order."""
    return kwlist.keys()


def values(kwlist: KeywordList) -> list[Any]:
    """Return the values of `kwlist`, in the order of their keys."""
    return kwlist.values()


def delete(kwlist: KeywordList, key: Keyword) -> KeywordList:
    """Return `kwlist` without the entry for `key`. If `key` is absent, `kwlist` is
    returned unchanged."""
    return kwlist.delete(key)


def put(kwlist: KeywordList, key: Keyword, value: Any) -> KeywordList:
    """Return `kwlist` with `value` stored under `key`, replacing any previous
    value."""
    return kwlist.put(key, value)


def merge(
    d1: KeywordList, d2: KeywordList, resolver: Optional[Resolver] = None
) -> KeywordList:
    """Merge two keyword lists. Conflicting keys are resolved by calling
    ``resolver(key, v1, v2)``; without a resolver the value from `d2` wins."""
    return d1.merge(d2, resolver)


def has_key(kwlist: KeywordList, key: Keyword) -> bool:
    """Return True if `kwlist` holds an entry for `key`."""
    return kwlist.contains(key)
