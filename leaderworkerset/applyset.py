"""Declarative apply configuration of a whole LeaderWorkerSet object.

A field left as ``None`` is not part of the configuration. The ``with_*``
methods set or extend a field and return the receiver, so calls can be chained.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from .api import GROUP_VERSION, SCHEME_GROUP_VERSION
from .applyconfig import (
    LeaderWorkerSetSpecApplyConfiguration,
    LeaderWorkerSetStatusApplyConfiguration,
    LeaderWorkerTemplateApplyConfiguration,
    NetworkConfigApplyConfiguration,
    RollingUpdateConfigurationApplyConfiguration,
    RolloutStrategyApplyConfiguration,
    SubGroupPolicyApplyConfiguration,
)
from .scheme import GroupVersionKind

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _int64(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"{name} {value} does not fit in 64 bits")
    return value


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _timestamp(value: Any, name: str) -> datetime:
    if not isinstance(value, datetime):
        raise TypeError(f"{name} must be a datetime, got {type(value).__name__}")
    return value


@dataclass
class OwnerReferenceApplyConfiguration:
    """Apply configuration of a reference to an owning object."""

    api_version: Optional[str] = None
    kind: Optional[str] = None
    name: Optional[str] = None
    uid: Optional[str] = None
    controller: Optional[bool] = None
    block_owner_deletion: Optional[bool] = None


@dataclass
class ObjectMetaApplyConfiguration:
    """Apply configuration of object metadata."""

    name: Optional[str] = None
    generate_name: Optional[str] = None
    namespace: Optional[str] = None
    uid: Optional[str] = None
    resource_version: Optional[str] = None
    generation: Optional[int] = None
    creation_timestamp: Optional[datetime] = None
    deletion_timestamp: Optional[datetime] = None
    deletion_grace_period_seconds: Optional[int] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    owner_references: List[OwnerReferenceApplyConfiguration] = field(default_factory=list)
    finalizers: List[str] = field(default_factory=list)


@dataclass
class LeaderWorkerSetApplyConfiguration:
    """Apply configuration of a LeaderWorkerSet object."""

    kind: Optional[str] = None
    api_version: Optional[str] = None
    object_meta: Optional[ObjectMetaApplyConfiguration] = None
    spec: Optional[LeaderWorkerSetSpecApplyConfiguration] = None
    status: Optional[LeaderWorkerSetStatusApplyConfiguration] = None

    def _meta(self) -> ObjectMetaApplyConfiguration:
        if self.object_meta is None:
            self.object_meta = ObjectMetaApplyConfiguration()
        return self.object_meta

    def with_kind(self, value: str) -> "LeaderWorkerSetApplyConfiguration":
        self.kind = _string(value, "kind")
        return self

    def with_api_version(self, value: str) -> "LeaderWorkerSetApplyConfiguration":
        self.api_version = _string(value, "apiVersion")
        return self

    def with_name(self, value: str) -> "LeaderWorkerSetApplyConfiguration":
        self._meta().name = _string(value, "name")
        return self

    def with_generate_name(self, value: str) -> "LeaderWorkerSetApplyConfiguration":
        self._meta().generate_name = _string(value, "generateName")
        return self

    def with_namespace(self, value: str) -> "LeaderWorkerSetApplyConfiguration":
        self._meta().namespace = _string(value, "namespace")
        return self

    def with_uid(self, value: str) -> "LeaderWorkerSetApplyConfiguration":
        self._meta().uid = _string(value, "uid")
        return self

    def with_resource_version(self, value: str) -> "LeaderWorkerSetApplyConfiguration":
        self._meta().resource_version = _string(value, "resourceVersion")
        return self

    def with_generation(self, value: int) -> "LeaderWorkerSetApplyConfiguration":
        self._meta().generation = _int64(value, "generation")
        return self

    def with_creation_timestamp(self, value: datetime) -> "LeaderWorkerSetApplyConfiguration":
        self._meta().creation_timestamp = _timestamp(value, "creationTimestamp")
        return self

    def with_deletion_timestamp(self, value: datetime) -> "LeaderWorkerSetApplyConfiguration":
        self._meta().deletion_timestamp = _timestamp(value, "deletionTimestamp")
        return self

    def with_deletion_grace_period_seconds(self, value: int) -> "LeaderWorkerSetApplyConfiguration":
        self._meta().deletion_grace_period_seconds = _int64(value, "deletionGracePeriodSeconds")
        return self

    def with_labels(self, entries: Mapping[str, str]) -> "LeaderWorkerSetApplyConfiguration":
        """Merge the entries into the labels, overwriting keys already present."""
        meta = self._meta()
        if meta.labels is None and entries:
            meta.labels = {}
        if entries:
            meta.labels.update(entries)
        return self

    def with_annotations(self, entries: Mapping[str, str]) -> "LeaderWorkerSetApplyConfiguration":
        """Merge the entries into the annotations, overwriting keys already present."""
        meta = self._meta()
        if meta.annotations is None and entries:
            meta.annotations = {}
        if entries:
            meta.annotations.update(entries)
        return self

    def with_owner_references(
        self, *args: OwnerReferenceApplyConfiguration
    ) -> "LeaderWorkerSetApplyConfiguration":
        """Append copies of the given owner references; None is rejected."""
        meta = self._meta()
        for reference in args:
            if reference is None:
                raise ValueError("nil value passed to WithOwnerReferences")
            meta.owner_references.append(copy.copy(reference))
        return self

    def with_finalizers(self, *args: str) -> "LeaderWorkerSetApplyConfiguration":
        """Append the given finalizers."""
        meta = self._meta()
        meta.finalizers.extend(_string(value, "finalizer") for value in args)
        return self

    def with_spec(
        self, value: Optional[LeaderWorkerSetSpecApplyConfiguration]
    ) -> "LeaderWorkerSetApplyConfiguration":
        self.spec = value
        return self

    def with_status(
        self, value: Optional[LeaderWorkerSetStatusApplyConfiguration]
    ) -> "LeaderWorkerSetApplyConfiguration":
        self.status = value
        return self

    def get_name(self) -> Optional[str]:
        """Return the configured name, or None if it is not set."""
        return self._meta().name


def leader_worker_set(name: str, namespace: str) -> LeaderWorkerSetApplyConfiguration:
    """Start an apply configuration for the named LeaderWorkerSet."""
    return (
        LeaderWorkerSetApplyConfiguration()
        .with_name(name)
        .with_namespace(namespace)
        .with_kind("LeaderWorkerSet")
        .with_api_version(str(GROUP_VERSION))
    )


_FACTORIES: Dict[GroupVersionKind, Callable[[], Any]] = {
    SCHEME_GROUP_VERSION.with_kind("LeaderWorkerSet"): LeaderWorkerSetApplyConfiguration,
    SCHEME_GROUP_VERSION.with_kind("LeaderWorkerSetSpec"): LeaderWorkerSetSpecApplyConfiguration,
    SCHEME_GROUP_VERSION.with_kind("LeaderWorkerSetStatus"): LeaderWorkerSetStatusApplyConfiguration,
    SCHEME_GROUP_VERSION.with_kind("LeaderWorkerTemplate"): LeaderWorkerTemplateApplyConfiguration,
    SCHEME_GROUP_VERSION.with_kind("NetworkConfig"): NetworkConfigApplyConfiguration,
    SCHEME_GROUP_VERSION.with_kind("RollingUpdateConfiguration"): RollingUpdateConfigurationApplyConfiguration,
    SCHEME_GROUP_VERSION.with_kind("RolloutStrategy"): RolloutStrategyApplyConfiguration,
    SCHEME_GROUP_VERSION.with_kind("SubGroupPolicy"): SubGroupPolicyApplyConfiguration,
}


def for_kind(kind: GroupVersionKind) -> Optional[Any]:
    """Return a new, empty apply configuration for the kind, or None if there is none."""
    factory = _FACTORIES.get(kind)
    return None if factory is None else factory()