import threading
from functools import total_ordering
from typing import Any, Optional

from pyrsistent import PMap, pmap
from typing_extensions import Unpack

from kwlist.lang.interfaces import ILispObject, ILookup, INamed
from kwlist.lang.obj import PrintSettings

_LOCK = threading.Lock()
_INTERN: "PMap[tuple[str, Optional[str]], Keyword]" = pmap()


@total_ordering
class Keyword(ILispObject, INamed):
    """Atomic identifier used as the key of a keyword list.

    Keywords are totally ordered: keywords without a namespace sort before any
    namespaced keyword and are ordered by name among themselves; namespaced
    keywords are ordered by namespace and then by name.

    Do not instantiate directly. Instead use the :py:func:`keyword` factory below,
    which returns the interned instance."""

    __slots__ = ("_name", "_ns", "_hash")

    def __init__(self, name: str, ns: Optional[str] = None) -> None:
        self._name = name
        self._ns = ns
        self._hash = hash_kw(name, ns)

    @property
    def name(self) -> str:
        return self._name

    @property
    def ns(self) -> Optional[str]:
        return self._ns

    @classmethod
    def with_name(cls, name: str, ns: Optional[str] = None) -> "Keyword":
        return keyword(name, ns=ns)

    def _lrepr(self, **kwargs: Unpack[PrintSettings]) -> str:
        if self._ns is not None:
            return f":{self._ns}/{self._name}"
        return f":{self._name}"

    def _sort_key(self) -> tuple[bool, str, str]:
        return (self._ns is not None, self._ns or "", self._name)

    def __eq__(self, other):
        return self is other or (
            isinstance(other, Keyword)
            and (self._name, self._ns) == (other._name, other._ns)
        )

    def __hash__(self):
        return self._hash

    def __lt__(self, other):
        if not isinstance(other, Keyword):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __call__(self, m: ILookup, default: Any = None) -> Any:
        try:
            return m.val_at(self, default)
        except (AttributeError, TypeError):
            return default

    def __reduce__(self):
        return keyword, (self._name, self._ns)


def hash_kw(name: str, ns: Optional[str] = None) -> int:
    """Return the hash of a potential Keyword instance by its name and namespace."""
    return hash((name, ns))


def find_keyword(name: str, ns: Optional[str] = None) -> Optional[Keyword]:
    """Return the already-interned keyword named by `name` and `ns`, if one exists.
    If the keyword with that name is not interned, return None."""
    with _LOCK:
        return _INTERN.get((name, ns))


def keyword(name: str, ns: Optional[str] = None) -> Keyword:
    """Return a keyword with name `name` and optional namespace `ns`.

    Keyword instances are interned, so an existing object may be returned if one
    with the same name and namespace are already interned."""
    global _INTERN

    if not isinstance(name, str) or not (ns is None or isinstance(ns, str)):
        raise TypeError("Keyword name and namespace must be strings")

    with _LOCK:
        found = _INTERN.get((name, ns))
        if found is not None:
            return found
        kw = Keyword(name, ns=ns)
        _INTERN = _INTERN.set((name, ns), kw)
        return kw


def is_keyword(o: Any) -> bool:
    """Return True if `o` is a Keyword."""
    return isinstance(o, Keyword)
