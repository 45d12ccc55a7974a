"""Structural discovery of a carrier buried under nested handle decorators.

Middleware and frameworks wrap a request's handle in their own decorators
without knowing about carriers. Discovery walks that decorator graph
breadth-first, looking at each decorator's directly reachable
sub-components:

1. ``__wrapped__`` (the ``functools.wraps`` convention),
2. attributes conventionally holding an inner handle,
3. closure cells, the ``__self__`` of bound methods and the parts of a
   :class:`functools.partial`,
4. every remaining instance attribute.

The shallowest carrier wins. Each object is visited once and the walk
stops after ``max_depth`` levels.
"""

from __future__ import annotations

import functools
import inspect
import logging
import types
from collections.abc import Iterator
from typing import Any

from fastapi_request_context.trace import CarrierMatch

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 8

INNER_HANDLE_NAMES: tuple[str, ...] = (
    "_wrapped",
    "wrapped",
    "_receive",
    "receive",
    "_stream",
    "stream",
    "_inner",
    "inner",
    "raw",
    "_raw",
    "fp",
    "_fp",
    "body",
)

# Values never searched: scalars, containers, classes and modules.
_LEAF_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    memoryview,
    dict,
    list,
    tuple,
    set,
    frozenset,
    type,
    types.ModuleType,
)

_SKIPPED_SLOTS = frozenset({"__dict__", "__weakref__"})
_CARRIER_METHODS = ("context", "set_context")


def is_carrier(obj: Any) -> bool:
    """Return True if ``obj`` satisfies the carrier capability.

    Methods are looked up statically on the type, so classes, modules and
    proxies answering every attribute through ``__getattr__`` never match.
    """
    if isinstance(obj, (type, types.ModuleType)):
        return False
    cls = type(obj)
    return all(
        callable(inspect.getattr_static(cls, name, None))
        for name in _CARRIER_METHODS
    )


def find_carrier(
    handle: Any, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> CarrierMatch | None:
    """Find the carrier reachable from ``handle``, or None."""
    if is_carrier(handle):
        return CarrierMatch(carrier=handle)

    visited = {id(handle)}
    frontier: list[tuple[Any, tuple[str, ...]]] = [(handle, ())]

    for _ in range(max_depth):
        next_frontier: list[tuple[Any, tuple[str, ...]]] = []
        for obj, path in frontier:
            if isinstance(obj, _LEAF_TYPES):
                continue
            for name, child in _sub_components(obj):
                if id(child) in visited:
                    continue
                visited.add(id(child))
                child_path = (*path, name)
                if is_carrier(child):
                    return CarrierMatch(carrier=child, path=child_path)
                if not isinstance(child, _LEAF_TYPES):
                    next_frontier.append((child, child_path))
        if not next_frontier:
            break
        frontier = next_frontier

    return None


def _sub_components(obj: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` for each sub-component, preferred first."""
    members = _members(obj)

    if "__wrapped__" in members:
        yield "__wrapped__", members.pop("__wrapped__")

    for name in INNER_HANDLE_NAMES:
        if name in members:
            yield name, members.pop(name)

    if isinstance(obj, types.FunctionType) and obj.__closure__:
        for name, cell in zip(obj.__code__.co_freevars, obj.__closure__):
            try:
                yield name, cell.cell_contents
            except ValueError:
                # Empty cell
                continue
    elif isinstance(obj, types.MethodType):
        yield "__self__", obj.__self__
    elif isinstance(obj, functools.partial):
        yield "func", obj.func
        for index, arg in enumerate(obj.args):
            yield f"args[{index}]", arg
        for key, value in obj.keywords.items():
            yield key, value

    yield from members.items()


def _members(obj: Any) -> dict[str, Any]:
    """Collect instance attributes from ``__dict__`` and ``__slots__``.

    Values are read without going through ``__getattr__`` so forwarding
    decorators are not triggered.
    """
    members: dict[str, Any] = {}
    try:
        members.update(vars(obj))
    except TypeError:
        pass
    except Exception:
        logger.debug("Skipping __dict__ of %s", type(obj).__qualname__)

    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in _SKIPPED_SLOTS:
                continue
            name = _mangle(cls, slot)
            if name in members:
                continue
            try:
                members[name] = object.__getattribute__(obj, name)
            except AttributeError:
                continue
            except Exception:
                logger.debug(
                    "Skipping slot %s of %s", name, type(obj).__qualname__
                )
    return members


def _mangle(cls: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{cls.__name__.lstrip('_')}{name}"
    return name
