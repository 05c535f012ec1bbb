"""Group/version/kind identifiers and a small type registry for API objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List


@dataclass(frozen=True)
class GroupVersionKind:
    """A kind of object within an API group and version."""

    group: str
    version: str
    kind: str

    @property
    def group_version(self) -> "GroupVersion":
        return GroupVersion(self.group, self.version)

    def __str__(self) -> str:
        return f"{self.group_version}, Kind={self.kind}"


@dataclass(frozen=True)
class GroupResource:
    """A resource within an API group, without a version."""

    group: str
    resource: str

    def __str__(self) -> str:
        if not self.group:
            return self.resource
        return f"{self.resource}.{self.group}"


@dataclass(frozen=True)
class GroupVersionResource:
    """A resource within an API group and version."""

    group: str
    version: str
    resource: str

    def group_resource(self) -> GroupResource:
        """Drop the version, keeping group and resource."""
        return GroupResource(self.group, self.resource)


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def with_kind(self, kind: str) -> GroupVersionKind:
        return GroupVersionKind(self.group, self.version, kind)

    def with_resource(self, resource: str) -> GroupVersionResource:
        return GroupVersionResource(self.group, self.version, resource)

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


class NotRegisteredError(KeyError):
    """Raised when a kind is looked up that no scheme entry covers."""

    def __init__(self, gvk: GroupVersionKind) -> None:
        super().__init__(gvk)
        self.gvk = gvk

    def __str__(self) -> str:
        return f"no kind {self.gvk.kind!r} is registered for version {self.gvk.group_version!s}"


def _as_type(obj: Any) -> type:
    return obj if isinstance(obj, type) else type(obj)


class Scheme:
    """Maps group/version/kinds to Python types."""

    def __init__(self) -> None:
        self._types: Dict[GroupVersionKind, type] = {}

    def add_known_types(self, group_version: GroupVersion, *args: Any) -> None:
        """Register each type (or an instance of it) under its class name as kind."""
        for obj in args:
            cls = _as_type(obj)
            gvk = group_version.with_kind(cls.__name__)
            existing = self._types.get(gvk)
            if existing is not None and existing is not cls:
                raise ValueError(
                    f"double registration of different types for {gvk}: "
                    f"old={existing.__module__}.{existing.__qualname__}, "
                    f"new={cls.__module__}.{cls.__qualname__}"
                )
            self._types[gvk] = cls

    def known_types(self, group_version: GroupVersion) -> Dict[str, type]:
        """Return the kinds registered for one group version."""
        return {
            gvk.kind: cls
            for gvk, cls in self._types.items()
            if gvk.group_version == group_version
        }

    def recognizes(self, gvk: GroupVersionKind) -> bool:
        return gvk in self._types

    def type_for(self, gvk: GroupVersionKind) -> type:
        try:
            return self._types[gvk]
        except KeyError:
            raise NotRegisteredError(gvk) from None


SchemeFunc = Callable[[Scheme], None]


@dataclass
class Builder:
    """Collects registration functions and applies them to a scheme."""

    group_version: GroupVersion
    _funcs: List[SchemeFunc] = field(default_factory=list, init=False, repr=False)

    def register(self, *args: Any) -> "Builder":
        """Queue the given types for registration under this builder's group version."""
        objects = tuple(args)
        group_version = self.group_version

        def add(scheme: Scheme) -> None:
            scheme.add_known_types(group_version, *objects)

        self._funcs.append(add)
        return self

    def register_func(self, func: SchemeFunc) -> "Builder":
        """Queue an arbitrary function to run against the scheme."""
        self._funcs.append(func)
        return self

    def register_all(self, other: "Builder") -> "Builder":
        """Queue everything the other builder has queued."""
        self._funcs.extend(other._funcs)
        return self

    def add_to_scheme(self, scheme: Scheme) -> None:
        """Run every queued function against the scheme, in order."""
        for func in self._funcs:
            func(scheme)

    def build(self) -> Scheme:
        """Return a new scheme with all queued registrations applied."""
        scheme = Scheme()
        self.add_to_scheme(scheme)
        return scheme