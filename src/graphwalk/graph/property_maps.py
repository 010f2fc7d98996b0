"""Property maps — value association keyed by vertex or edge descriptor.

A property map is anything subscriptable by descriptor.  Read-only maps
implement ``__getitem__``; read-write maps also implement ``__setitem__``.
Plain lists and numpy arrays indexed by vertex are read-write vertex maps
as they stand, since vertex descriptors are dense indices.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from graphwalk.exceptions import CapabilityMissingError

if TYPE_CHECKING:
    from collections.abc import Callable, MutableSequence


@runtime_checkable
class ReadablePropertyMap(Protocol):
    """Read-only map: ``pmap[key] -> value``."""

    def __getitem__(self, key: Any) -> Any: ...


@runtime_checkable
class ReadWritePropertyMap(Protocol):
    """Read-write map: ``pmap[key] = value`` as well as lookup."""

    def __getitem__(self, key: Any) -> Any: ...
    def __setitem__(self, key: Any, value: Any) -> None: ...


def get(pmap: ReadablePropertyMap, key: Any) -> Any:
    """Return the value *pmap* associates with *key*."""
    return pmap[key]


def put(pmap: ReadablePropertyMap, key: Any, value: Any) -> None:
    """Associate *value* with *key*.  Raises for read-only maps."""
    require_writable(pmap, "property map")
    pmap[key] = value  # type: ignore[index]


def require_writable(pmap: object, name: str) -> None:
    """Raise ``CapabilityMissingError`` unless *pmap* supports assignment."""
    if not isinstance(pmap, ReadWritePropertyMap):
        msg = f"{name} must be writable; {type(pmap).__name__} is read-only"
        raise CapabilityMissingError(msg)


class IdentityPropertyMap:
    """Maps every key to itself.  The vertex index map of dense graphs."""

    __slots__ = ()

    def __getitem__(self, key: Any) -> Any:
        return key

    def __repr__(self) -> str:
        return "IdentityPropertyMap()"


class FunctionPropertyMap:
    """Read-only map computed by a pure function; nothing is cached."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[Any], Any]) -> None:
        self._fn = fn

    def __getitem__(self, key: Any) -> Any:
        return self._fn(key)

    def __repr__(self) -> str:
        return f"FunctionPropertyMap({self._fn!r})"


class ArrayPropertyMap:
    """Read-write map over caller-owned storage, addressed through an index map.

    Descriptors must map injectively to indices in ``[0, len(storage))``.
    """

    __slots__ = ("_index", "_storage")

    def __init__(
        self,
        storage: MutableSequence[Any],
        index_map: ReadablePropertyMap | None = None,
    ) -> None:
        self._storage = storage
        self._index = index_map if index_map is not None else IdentityPropertyMap()

    @property
    def storage(self) -> MutableSequence[Any]:
        """The backing storage (not a copy)."""
        return self._storage

    def __getitem__(self, key: Any) -> Any:
        return self._storage[self._index[key]]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._storage[self._index[key]] = value

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"ArrayPropertyMap(size={len(self._storage)})"


class AttributePropertyMap:
    """Read-write map over one named attribute of per-descriptor payload dicts.

    *payload_of* resolves a descriptor to its mutable attribute dict; it is
    responsible for rejecting descriptors from other graphs.
    """

    __slots__ = ("_default", "_name", "_payload_of")

    def __init__(
        self,
        payload_of: Callable[[Any], dict[str, Any]],
        name: str,
        default: Any = None,
    ) -> None:
        self._payload_of = payload_of
        self._name = name
        self._default = default

    @property
    def name(self) -> str:
        """Attribute name this map reads and writes."""
        return self._name

    def __getitem__(self, key: Any) -> Any:
        return self._payload_of(key).get(self._name, self._default)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._payload_of(key)[self._name] = value

    def __repr__(self) -> str:
        return f"AttributePropertyMap(name={self._name!r}, default={self._default!r})"
