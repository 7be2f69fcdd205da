from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from functools import singledispatch
from itertools import islice
from typing import Any, Union, cast

from typing_extensions import TypedDict, Unpack

PrintCountSetting = Union[bool, int, None]

SURPASSED_PRINT_LENGTH = "..."
SURPASSED_PRINT_LEVEL = "#"

PRINT_LENGTH: PrintCountSetting = None
PRINT_LEVEL: PrintCountSetting = None
PRINT_READABLY = True
PRINT_SEPARATOR = " "


class PrintSettings(TypedDict, total=False):
    human_readable: bool
    print_length: PrintCountSetting
    print_level: PrintCountSetting
    print_readably: bool


def _dec_print_level(lvl: PrintCountSetting) -> PrintCountSetting:
    """Decrement the print level if it is numeric."""
    if isinstance(lvl, int) and not isinstance(lvl, bool):
        return lvl - 1
    return lvl


def process_lrepr_kwargs(**kwargs: Unpack[PrintSettings]) -> PrintSettings:
    """Process keyword arguments, decreasing the print-level. Should be called
    after examining the print level for the current level."""
    return cast(
        PrintSettings, dict(kwargs, print_level=_dec_print_level(kwargs["print_level"]))
    )


class LispObject(ABC):
    """Abstract base class for objects which would like to customize their
    ``__str__`` and Python ``__repr__`` representation.

    .. note::

       Callers should use :py:class:`kwlist.lang.interfaces.ILispObject` as their
       main interface. This interface is defined here so it may be used in
       ``isinstance`` checks below without a circular dependency."""

    __slots__ = ()

    def __repr__(self):
        return self.lrepr()

    def __str__(self):
        return self.lrepr(human_readable=True)

    @abstractmethod
    def _lrepr(self, **kwargs: Unpack[PrintSettings]) -> str:
        """Private representation method. Callers (including object internal
        callers) should not call this method directly, but instead should use the
        module function :py:meth:`lrepr` ."""
        raise NotImplementedError()

    def lrepr(self, **kwargs: Unpack[PrintSettings]) -> str:
        """Return a string representation of this object which reads like a
        keyword literal."""
        return lrepr(self, **kwargs)


def _truncated(items: Iterable[str], print_length: PrintCountSetting) -> list[str]:
    if isinstance(print_length, int) and not isinstance(print_length, bool):
        collected = list(islice(items, print_length + 1))
        if len(collected) > print_length:
            collected.pop()
            collected.append(SURPASSED_PRINT_LENGTH)
        return collected
    return list(items)


def seq_lrepr(
    iterable: Iterable[Any],
    start: str,
    end: str,
    **kwargs: Unpack[PrintSettings],
) -> str:
    """Produce a representation of a sequential collection, bookended with the
    start and end string supplied. The keyword arguments will be passed along to
    lrepr for the sequence elements."""
    print_level = kwargs["print_level"]
    if isinstance(print_level, int) and print_level < 1:
        return SURPASSED_PRINT_LEVEL

    kwargs = process_lrepr_kwargs(**kwargs)

    kw_items = kwargs.copy()
    kw_items["human_readable"] = False
    items = _truncated(
        (lrepr(o, **kw_items) for o in iterable), kwargs["print_length"]
    )
    return f"{start}{PRINT_SEPARATOR.join(items)}{end}"


def kv_lrepr(
    entries: Iterable[tuple[Any, Any]],
    start: str,
    end: str,
    **kwargs: Unpack[PrintSettings],
) -> str:
    """Produce a representation of an associative collection, bookended with the
    start and end string supplied. Each entry is printed as its key followed by its
    value, with no delimiters around individual entries."""
    print_level = kwargs["print_level"]
    if isinstance(print_level, int) and print_level < 1:
        return SURPASSED_PRINT_LEVEL

    kwargs = process_lrepr_kwargs(**kwargs)

    kw_items = kwargs.copy()
    kw_items["human_readable"] = False
    items = _truncated(
        (f"{lrepr(k, **kw_items)} {lrepr(v, **kw_items)}" for k, v in entries),
        kwargs["print_length"],
    )
    return f"{start}{PRINT_SEPARATOR.join(items)}{end}"


# pylint: disable=unused-argument
@singledispatch
def lrepr(
    o: Any,
    human_readable: bool = False,
    print_length: PrintCountSetting = PRINT_LENGTH,
    print_level: PrintCountSetting = PRINT_LEVEL,
    print_readably: bool = PRINT_READABLY,
) -> str:
    """Return a string representation of an object.

    Permissible keyword arguments are:
    - human_readable: if logical True, print strings without quotations or
                      escape sequences (default: false)
    - print_length: the number of items in a collection which will be printed,
                    or no limit if bound to a logical falsey value (default: nil)
    - print_level: the depth of the object graph to print, starting with 0, or
                   no limit if bound to a logical falsey value (default: nil)
    - print_readably: if logical false, print strings with non-alphanumeric
                      characters converted to escape sequences (default: true)"""
    return repr(o)


@lrepr.register(LispObject)
def _lrepr_lisp_obj(
    o: Any,
    human_readable: bool = False,
    print_length: PrintCountSetting = PRINT_LENGTH,
    print_level: PrintCountSetting = PRINT_LEVEL,
    print_readably: bool = PRINT_READABLY,
) -> str:
    return o._lrepr(
        human_readable=human_readable,
        print_length=print_length,
        print_level=print_level,
        print_readably=print_readably,
    )


@lrepr.register(bool)
def _lrepr_bool(o: bool, **_) -> str:
    return repr(o).lower()


@lrepr.register(type(None))
def _lrepr_nil(_: None, **__) -> str:
    return "nil"


@lrepr.register(str)
def _lrepr_str(
    o: str, human_readable: bool = False, print_readably: bool = PRINT_READABLY, **_
) -> str:
    if human_readable:
        return o
    if print_readably is None or print_readably is False:
        return o
    escaped = o.encode("unicode_escape").replace(b'"', rb"\"").decode("utf-8")
    return f'"{escaped}"'


@lrepr.register(list)
def _lrepr_py_list(o: list, **kwargs: Unpack[PrintSettings]) -> str:
    return f"#py {seq_lrepr(o, '[', ']', **_with_defaults(kwargs))}"


@lrepr.register(tuple)
def _lrepr_py_tuple(o: tuple, **kwargs: Unpack[PrintSettings]) -> str:
    return f"#py {seq_lrepr(o, '(', ')', **_with_defaults(kwargs))}"


@lrepr.register(Mapping)
def _lrepr_mapping(o: Mapping, **kwargs: Unpack[PrintSettings]) -> str:
    return kv_lrepr(o.items(), "{", "}", **_with_defaults(kwargs))


def _with_defaults(kwargs: PrintSettings) -> PrintSettings:
    """Fill in any print settings not given by the caller, since the registered
    implementations for builtin collections may be called directly through
    :py:func:`lrepr` with no keyword arguments at all."""
    settings = PrintSettings(
        human_readable=False,
        print_length=PRINT_LENGTH,
        print_level=PRINT_LEVEL,
        print_readably=PRINT_READABLY,
    )
    settings.update(kwargs)
    return settings
