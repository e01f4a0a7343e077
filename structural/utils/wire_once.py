from __future__ import annotations

from typing import Any, Generic, Optional, Type, TypeVar, overload

from ..domain.errors import ConstructionError

T = TypeVar("T")

_UNSET = object()

class WireOnce(Generic[T]):
    """Attribute that may be assigned exactly once with a non-``None`` value.

    Used for back-references that cannot exist when the owner is constructed:
    create the owner unwired, build the referenced object, then assign.
    Reading before assignment, assigning ``None``, and reassigning all raise
    :class:`ConstructionError`.
    """

    def __set_name__(self, owner: Type[Any], name: str) -> None:
        self.public_name = name
        self.private_name = f"_wired_{name}"

    @overload
    def __get__(self, instance: None, owner: Type[Any]) -> "WireOnce[T]": ...
    @overload
    def __get__(self, instance: object, owner: Type[Any]) -> T: ...

    def __get__(self, instance: Optional[object], owner: Type[Any]) -> Any:
        if instance is None:
            return self
        value = instance.__dict__.get(self.private_name, _UNSET)
        if value is _UNSET:
            raise ConstructionError(
                f"{type(instance).__name__}.{self.public_name} has not been wired yet"
            )
        return value

    def __set__(self, instance: object, value: T) -> None:
        if value is None:
            raise ConstructionError(
                f"{type(instance).__name__}.{self.public_name} requires a non-None reference"
            )
        if self.private_name in instance.__dict__:
            raise ConstructionError(
                f"{type(instance).__name__}.{self.public_name} is already wired"
            )
        instance.__dict__[self.private_name] = value


__all__ = ["WireOnce"]
