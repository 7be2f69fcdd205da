from typing import Generic, TypeVar

import attr

T = TypeVar("T")


@attr.frozen
class Reduced(Generic[T]):
    value: T

    def deref(self) -> T:
        return self.value
