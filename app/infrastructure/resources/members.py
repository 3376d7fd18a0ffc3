"""Injection markers and annotated member discovery.

Fields are marked with ``Annotated[T, InjectedResource(...)]`` and setters
with the ``@injected_resource(...)`` decorator:

    class Window:
        _title: Annotated[str, InjectedResource()] = ""
        _width: Annotated[int, InjectedResource(key="window.width")] = 0

        @injected_resource(default="Ready")
        def set_status(self, value: str) -> None:
            self._status = value

A MemberSource turns a class into its own AnnotatedMembers; the injector
only consumes that query.
"""

import inspect
import sys
import types
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import (
    Annotated,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
    get_args,
    get_origin,
)

INJECTED_RESOURCE_ATTR = "__injected_resource__"


@dataclass(frozen=True)
class InjectedResource:
    """Injection metadata for a field or setter.

    Attributes:
        key: Explicit resource key; empty or None derives one from the
            declaring class and member name.
        args: Literal placeholder arguments.
        default: Text used when the key is missing, converted to the
            member's type. A blank default means no default.
    """

    key: Optional[str] = None
    args: Tuple[str, ...] = field(default_factory=tuple)
    default: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.args, str):
            object.__setattr__(self, "args", (self.args,))
        else:
            object.__setattr__(self, "args", tuple(self.args))
        if self.default is not None and not self.default.strip():
            object.__setattr__(self, "default", None)


def injected_resource(
    key: Optional[str] = None,
    *,
    args: Sequence[str] = (),
    default: Optional[str] = None,
) -> Callable[[Callable], Callable]:
    """Decorator marking a single-argument setter for resource injection.

    Raises:
        TypeError: If the decorated function does not take exactly one
            argument besides self.
    """
    metadata = InjectedResource(key=key, args=tuple(args), default=default)

    def decorator(func: Callable) -> Callable:
        params = list(inspect.signature(func).parameters.values())
        if len(params) != 2:
            raise TypeError(
                f"@injected_resource setter {func.__qualname__} must take exactly "
                "one argument besides self"
            )
        setattr(func, INJECTED_RESOURCE_ATTR, metadata)
        return func

    return decorator


class MemberKind(Enum):
    FIELD = "field"
    SETTER = "setter"


@dataclass(frozen=True)
class AnnotatedMember:
    """A field or setter of one class carrying injection metadata.

    Attributes:
        owner: Declaring class.
        name: Attribute or function name as declared.
        kind: FIELD or SETTER.
        target_type: Static type the resolved text is converted to.
        metadata: The InjectedResource marker.
        accessor: The setter function, for SETTER members.
    """

    owner: type
    name: str
    kind: MemberKind
    target_type: Any
    metadata: InjectedResource
    accessor: Optional[Callable] = None

    @property
    def logical_name(self) -> str:
        """Field name, or setter name without its "set" prefix.

        setValue -> value, set_int_value -> int_value.
        """
        if self.kind is MemberKind.FIELD:
            return self.name
        name = self.name
        if name.startswith("set_") and len(name) > 4:
            return name[4:]
        if name.startswith("set") and len(name) > 3:
            return name[3].lower() + name[4:]
        return name

    @property
    def key(self) -> str:
        """Explicit key, or "<module>.<qualname>.<logical_name>"."""
        if self.metadata.key:
            return self.metadata.key
        return f"{self.owner.__module__}.{self.owner.__qualname__}.{self.logical_name}"

    def write(self, target: Any, value: Any) -> None:
        """Store a value on target, bypassing normal attribute access.

        Fields are written with object.__setattr__, so custom __setattr__
        hooks and frozen dataclasses do not interfere. Setters are invoked
        through the declaring class's own function.
        """
        if self.kind is MemberKind.FIELD:
            object.__setattr__(target, self.name, value)
        else:
            assert self.accessor is not None
            self.accessor(target, value)


def _own_annotations(obj: Any) -> Dict[str, Any]:
    """Return obj's own annotations, leaving postponed ones as strings.

    Names that only exist under TYPE_CHECKING must not break a scan, so
    nothing is evaluated here.
    """
    if sys.version_info >= (3, 14):
        import annotationlib

        return annotationlib.get_annotations(
            obj, format=annotationlib.Format.FORWARDREF
        )
    return inspect.get_annotations(obj)


def _evaluate(
    hint: Any,
    globalns: Dict[str, Any],
    localns: Optional[Dict[str, Any]] = None,
) -> Any:
    if isinstance(hint, str):
        return eval(hint, globalns, localns)
    return hint


def _mentions_marker(hint: Any) -> bool:
    return not isinstance(hint, str) or InjectedResource.__name__ in hint


def _unwrap_optional(hint: Any) -> Any:
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        members = [a for a in get_args(hint) if a is not type(None)]
        if len(members) == 1:
            return members[0]
    return hint


def _marker_from(metadata: Sequence[Any]) -> Optional[InjectedResource]:
    for item in metadata:
        if isinstance(item, InjectedResource):
            return item
        if item is InjectedResource:
            return InjectedResource()
    return None


def _field_member(owner: type, name: str, hint: Any) -> Optional[AnnotatedMember]:
    hint = _unwrap_optional(hint)
    if get_origin(hint) is not Annotated:
        return None
    base, *extras = get_args(hint)
    marker = _marker_from(extras)
    if marker is None:
        return None
    return AnnotatedMember(
        owner=owner,
        name=name,
        kind=MemberKind.FIELD,
        target_type=_unwrap_optional(base),
        metadata=marker,
    )


def _setter_member(owner: type, name: str, func: Callable) -> AnnotatedMember:
    marker: InjectedResource = getattr(func, INJECTED_RESOURCE_ATTR)
    value_param = list(inspect.signature(func).parameters)[1]
    hint = _own_annotations(func).get(value_param, str)
    target_type = _unwrap_optional(_evaluate(hint, func.__globals__))
    return AnnotatedMember(
        owner=owner,
        name=name,
        kind=MemberKind.SETTER,
        target_type=target_type,
        metadata=marker,
        accessor=func,
    )


class MemberSource(ABC):
    """Supplies the annotated members a class declares itself."""

    @abstractmethod
    def members_of(self, cls: type) -> Tuple[AnnotatedMember, ...]:
        """Return the members declared directly on cls, not inherited ones."""
        pass


@lru_cache(maxsize=None)
def _scan(cls: type) -> Tuple[AnnotatedMember, ...]:
    members: List[AnnotatedMember] = []
    module = sys.modules.get(cls.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = dict(vars(cls))

    for name, hint in _own_annotations(cls).items():
        # Postponed hints are evaluated only when they carry the marker
        if not _mentions_marker(hint):
            continue
        member = _field_member(cls, name, _evaluate(hint, globalns, localns))
        if member is not None:
            members.append(member)

    for name, attr in vars(cls).items():
        if inspect.isfunction(attr) and hasattr(attr, INJECTED_RESOURCE_ATTR):
            members.append(_setter_member(cls, name, attr))

    return tuple(members)


class IntrospectionMemberSource(MemberSource):
    """MemberSource reading class annotations and decorated functions.

    Scans are cached per class since class structure does not change.
    """

    def members_of(self, cls: type) -> Tuple[AnnotatedMember, ...]:
        return _scan(cls)


@lru_cache(maxsize=None)
def ancestor_chain(cls: type) -> Tuple[type, ...]:
    """Return cls followed by each of its ancestors, once each."""
    return tuple(cls.__mro__)
