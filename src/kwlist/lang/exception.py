from collections.abc import Mapping
from typing import Any

import attr

from kwlist.lang.obj import lrepr


@attr.define(repr=False, str=False)
class ExceptionInfo(Exception):
    """Exception carrying a map of contextual information about the failure in
    addition to its message."""

    message: str
    data: Mapping[str, Any] = attr.field(factory=dict)

    def __repr__(self):
        name = f"{type(self).__module__}.{type(self).__qualname__}"
        return f"{name}({self.message}, {lrepr(self.data)})"

    def __str__(self):
        return f"{self.message} {lrepr(self.data)}"


class ContractError(ExceptionInfo):
    """Base class for precondition violations by callers of the keyword list
    operations. These are programming errors and are never recovered internally."""


class KeyContractError(ContractError):
    """Raised when a key which is not an ordered keyword is given to a keyword list
    operation."""


class TransformContractError(ContractError):
    """Raised when the transform given to ``from_enum`` does not produce a
    ``(key, value)`` pair."""


class InvariantError(ContractError):
    """Raised when a sequence adopted as a keyword list is not strictly sorted by
    key."""
