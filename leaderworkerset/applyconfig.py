"""Declarative apply configurations for the parts of a LeaderWorkerSet.

Every field is optional: a field left as ``None`` is not part of the
configuration. The ``with_*`` methods set a field and return the receiver so
that configurations can be built by chaining calls.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .api import (
    IntOrString,
    RestartPolicyType,
    RolloutStrategyType,
    StartupPolicyType,
    SubdomainPolicy,
)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _int32(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"{name} {value} does not fit in 32 bits")
    return value


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


@dataclass
class SubGroupPolicyApplyConfiguration:
    """Apply configuration of a subgroup policy."""

    sub_group_size: Optional[int] = None

    def with_sub_group_size(self, value: int) -> "SubGroupPolicyApplyConfiguration":
        self.sub_group_size = _int32(value, "subGroupSize")
        return self


@dataclass
class NetworkConfigApplyConfiguration:
    """Apply configuration of the network settings."""

    subdomain_policy: Optional[SubdomainPolicy] = None

    def with_subdomain_policy(self, value: Any) -> "NetworkConfigApplyConfiguration":
        self.subdomain_policy = SubdomainPolicy(value)
        return self


@dataclass
class RollingUpdateConfigurationApplyConfiguration:
    """Apply configuration of the rolling update limits."""

    max_unavailable: Optional[IntOrString] = None
    max_surge: Optional[IntOrString] = None

    def with_max_unavailable(self, value: Any) -> "RollingUpdateConfigurationApplyConfiguration":
        self.max_unavailable = IntOrString.from_json(value)
        return self

    def with_max_surge(self, value: Any) -> "RollingUpdateConfigurationApplyConfiguration":
        self.max_surge = IntOrString.from_json(value)
        return self


@dataclass
class RolloutStrategyApplyConfiguration:
    """Apply configuration of the rollout strategy."""

    type: Optional[RolloutStrategyType] = None
    rolling_update_configuration: Optional[RollingUpdateConfigurationApplyConfiguration] = None

    def with_type(self, value: Any) -> "RolloutStrategyApplyConfiguration":
        self.type = RolloutStrategyType(value)
        return self

    def with_rolling_update_configuration(
        self, value: Optional[RollingUpdateConfigurationApplyConfiguration]
    ) -> "RolloutStrategyApplyConfiguration":
        self.rolling_update_configuration = value
        return self


@dataclass
class LeaderWorkerTemplateApplyConfiguration:
    """Apply configuration of the leader/worker template; pod templates are mappings."""

    leader_template: Optional[Dict[str, Any]] = None
    worker_template: Optional[Dict[str, Any]] = None
    size: Optional[int] = None
    restart_policy: Optional[RestartPolicyType] = None
    sub_group_policy: Optional[SubGroupPolicyApplyConfiguration] = None

    def with_leader_template(self, value: Optional[Dict[str, Any]]) -> "LeaderWorkerTemplateApplyConfiguration":
        self.leader_template = value
        return self

    def with_worker_template(self, value: Optional[Dict[str, Any]]) -> "LeaderWorkerTemplateApplyConfiguration":
        self.worker_template = value
        return self

    def with_size(self, value: int) -> "LeaderWorkerTemplateApplyConfiguration":
        self.size = _int32(value, "size")
        return self

    def with_restart_policy(self, value: Any) -> "LeaderWorkerTemplateApplyConfiguration":
        self.restart_policy = RestartPolicyType(value)
        return self

    def with_sub_group_policy(
        self, value: Optional[SubGroupPolicyApplyConfiguration]
    ) -> "LeaderWorkerTemplateApplyConfiguration":
        self.sub_group_policy = value
        return self


@dataclass
class LeaderWorkerSetSpecApplyConfiguration:
    """Apply configuration of a LeaderWorkerSet spec."""

    replicas: Optional[int] = None
    leader_worker_template: Optional[LeaderWorkerTemplateApplyConfiguration] = None
    rollout_strategy: Optional[RolloutStrategyApplyConfiguration] = None
    startup_policy: Optional[StartupPolicyType] = None
    network_config: Optional[NetworkConfigApplyConfiguration] = None

    def with_replicas(self, value: int) -> "LeaderWorkerSetSpecApplyConfiguration":
        self.replicas = _int32(value, "replicas")
        return self

    def with_leader_worker_template(
        self, value: Optional[LeaderWorkerTemplateApplyConfiguration]
    ) -> "LeaderWorkerSetSpecApplyConfiguration":
        self.leader_worker_template = value
        return self

    def with_rollout_strategy(
        self, value: Optional[RolloutStrategyApplyConfiguration]
    ) -> "LeaderWorkerSetSpecApplyConfiguration":
        self.rollout_strategy = value
        return self

    def with_startup_policy(self, value: Any) -> "LeaderWorkerSetSpecApplyConfiguration":
        self.startup_policy = StartupPolicyType(value)
        return self

    def with_network_config(
        self, value: Optional[NetworkConfigApplyConfiguration]
    ) -> "LeaderWorkerSetSpecApplyConfiguration":
        self.network_config = value
        return self


@dataclass
class ConditionApplyConfiguration:
    """Apply configuration of one status condition."""

    type: Optional[str] = None
    status: Optional[str] = None
    observed_generation: Optional[int] = None
    last_transition_time: Optional[str] = None
    reason: Optional[str] = None
    message: Optional[str] = None


@dataclass
class LeaderWorkerSetStatusApplyConfiguration:
    """Apply configuration of a LeaderWorkerSet status."""

    conditions: List[ConditionApplyConfiguration] = field(default_factory=list)
    ready_replicas: Optional[int] = None
    updated_replicas: Optional[int] = None
    replicas: Optional[int] = None
    hpa_pod_selector: Optional[str] = None

    def with_conditions(self, *args: ConditionApplyConfiguration) -> "LeaderWorkerSetStatusApplyConfiguration":
        """Append copies of the given conditions; None is rejected."""
        for condition in args:
            if condition is None:
                raise ValueError("nil value passed to WithConditions")
            self.conditions.append(copy.copy(condition))
        return self

    def with_ready_replicas(self, value: int) -> "LeaderWorkerSetStatusApplyConfiguration":
        self.ready_replicas = _int32(value, "readyReplicas")
        return self

    def with_updated_replicas(self, value: int) -> "LeaderWorkerSetStatusApplyConfiguration":
        self.updated_replicas = _int32(value, "updatedReplicas")
        return self

    def with_replicas(self, value: int) -> "LeaderWorkerSetStatusApplyConfiguration":
        self.replicas = _int32(value, "replicas")
        return self

    def with_hpa_pod_selector(self, value: str) -> "LeaderWorkerSetStatusApplyConfiguration":
        self.hpa_pod_selector = _string(value, "hpaPodSelector")
        return self


def sub_group_policy() -> SubGroupPolicyApplyConfiguration:
    return SubGroupPolicyApplyConfiguration()


def network_config() -> NetworkConfigApplyConfiguration:
    return NetworkConfigApplyConfiguration()


def rolling_update_configuration() -> RollingUpdateConfigurationApplyConfiguration:
    return RollingUpdateConfigurationApplyConfiguration()


def rollout_strategy() -> RolloutStrategyApplyConfiguration:
    return RolloutStrategyApplyConfiguration()


def leader_worker_template() -> LeaderWorkerTemplateApplyConfiguration:
    return LeaderWorkerTemplateApplyConfiguration()


def leader_worker_set_spec() -> LeaderWorkerSetSpecApplyConfiguration:
    return LeaderWorkerSetSpecApplyConfiguration()


def leader_worker_set_status() -> LeaderWorkerSetStatusApplyConfiguration:
    return LeaderWorkerSetStatusApplyConfiguration()