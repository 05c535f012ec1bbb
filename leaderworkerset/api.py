"""The LeaderWorkerSet resource: its spec, status, enums and well-known keys.

One group is a single leader pod and M workers. A LeaderWorkerSet runs N such
groups; each group has an index between 0 and N-1, and each pod in a group a
worker index, where the leader's is always 0.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from .scheme import Builder, GroupResource, GroupVersion, Scheme

# Annotation naming the topology used for 1:1 exclusive scheduling.
EXCLUSIVE_KEY_ANNOTATION_KEY = "leaderworkerset.sigs.k8s.io/exclusive-topology"
# Annotation naming the topology for exclusive scheduling within a subgroup.
SUB_GROUP_EXCLUSIVE_KEY_ANNOTATION_KEY = "leaderworkerset.sigs.k8s.io/subgroup-exclusive-topology"
# Label recording which LeaderWorkerSet a pod, service or stateful set belongs to.
SET_NAME_LABEL_KEY = "leaderworkerset.sigs.k8s.io/name"
# Label recording the group a stateful set or pod belongs to.
GROUP_INDEX_LABEL_KEY = "leaderworkerset.sigs.k8s.io/group-index"
# Label and annotation holding a pod's index within its group.
WORKER_INDEX_LABEL_KEY = "leaderworkerset.sigs.k8s.io/worker-index"
# Annotation on leader pods holding the group size.
SIZE_ANNOTATION_KEY = "leaderworkerset.sigs.k8s.io/size"
# Annotation on the leader stateful set holding the replica count.
REPLICAS_ANNOTATION_KEY = "leaderworkerset.sigs.k8s.io/replicas"
# Unique hash shared by all pods of one group.
GROUP_UNIQUE_HASH_LABEL_KEY = "leaderworkerset.sigs.k8s.io/group-key"
# Annotation on worker pods naming their leader pod.
LEADER_POD_NAME_ANNOTATION_KEY = "leaderworkerset.sigs.k8s.io/leader-name"
# Hash of the controller revision matching an object.
REVISION_KEY = "leaderworkerset.sigs.k8s.io/template-revision-hash"
# Environment variable addressing the leader through the headless service.
LWS_LEADER_ADDRESS = "LWS_LEADER_ADDRESS"
# Environment variable holding the group size.
LWS_GROUP_SIZE = "LWS_GROUP_SIZE"
# Label holding the subgroup a pod is part of; set only with a subgroup size.
SUB_GROUP_INDEX_LABEL_KEY = "leaderworkerset.sigs.k8s.io/subgroup-index"
# Annotation holding the subgroup size.
SUB_GROUP_SIZE_ANNOTATION_KEY = "leaderworkerset.gke.io/subgroup-size"
# Unique hash shared by all pods of one subgroup.
SUB_GROUP_UNIQUE_HASH_LABEL_KEY = "leaderworkerset.sigs.k8s.io/subgroup-key"
# Annotation on leader pods naming the subdomain policy in effect.
SUBDOMAIN_POLICY_ANNOTATION_KEY = "leaderworkerset.sigs.k8s.io/subdomainPolicy"

GROUP_VERSION = GroupVersion("leaderworkerset.x-k8s.io", "v1")
SCHEME_GROUP_VERSION = GROUP_VERSION

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def resource(resource: str) -> GroupResource:
    """Qualify a resource name with this API group."""
    return GROUP_VERSION.with_resource(resource).group_resource()


class SubdomainPolicy(str, Enum):
    """How headless services are created for the groups."""

    SHARED = "Shared"
    UNIQUE_PER_REPLICA = "UniquePerReplica"


class RolloutStrategyType(str, Enum):
    """How replicas are updated when the template changes."""

    ROLLING_UPDATE = "RollingUpdate"


class RestartPolicyType(str, Enum):
    """What happens to a group when one of its pods fails."""

    RECREATE_GROUP_ON_POD_RESTART = "RecreateGroupOnPodRestart"
    DEPRECATED_DEFAULT = "Default"
    NONE = "None"


class StartupPolicyType(str, Enum):
    """When the workers' stateful set is created."""

    LEADER_READY = "LeaderReady"
    LEADER_CREATED = "LeaderCreated"


class LeaderWorkerSetConditionType(str, Enum):
    """Built-in condition types of a LeaderWorkerSet."""

    AVAILABLE = "Available"
    PROGRESSING = "Progressing"
    UPDATE_IN_PROGRESS = "UpdateInProgress"


_E = TypeVar("_E", bound=Enum)


def _int(value: Any, name: str, *, int32: bool = True) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if int32 and not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"{name} {value} does not fit in 32 bits")
    return value


def _opt_int(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    return None if value is None else _int(value, key)


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _mapping(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be an object, got {type(value).__name__}")
    return value


def _enum(cls: Type[_E], value: Any, name: str) -> Optional[_E]:
    if value is None or value == "":
        return None
    try:
        return cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in cls)
        raise ValueError(f"unsupported {name} {value!r}; allowed: {allowed}") from None


def _enum_text(member: Optional[Enum]) -> str:
    return "" if member is None else member.value


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class IntOrString:
    """A value that is either a 32-bit integer or a string such as "30%"."""

    value: Union[int, str] = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            return
        _int(self.value, "int-or-string value")

    @property
    def is_int(self) -> bool:
        return isinstance(self.value, int)

    def to_json(self) -> Union[int, str]:
        return self.value

    @staticmethod
    def from_json(value: Any) -> "IntOrString":
        if isinstance(value, IntOrString):
            return value
        return IntOrString(value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class SubGroupPolicy:
    """How each group is split into subgroups."""

    sub_group_size: Optional[int] = None

    def _to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.sub_group_size is not None:
            out["subGroupSize"] = self.sub_group_size
        return out

    @classmethod
    def _from_json(cls, data: Any) -> "SubGroupPolicy":
        data = _mapping(data, "subGroupPolicy")
        return cls(sub_group_size=_opt_int(data, "subGroupSize"))


@dataclass
class NetworkConfig:
    """Network settings of the groups."""

    subdomain_policy: Optional[SubdomainPolicy] = None

    def _to_json(self) -> Dict[str, Any]:
        return {
            "subdomainPolicy": None if self.subdomain_policy is None else self.subdomain_policy.value
        }

    @classmethod
    def _from_json(cls, data: Any) -> "NetworkConfig":
        data = _mapping(data, "networkConfig")
        return cls(subdomain_policy=_enum(SubdomainPolicy, data.get("subdomainPolicy"), "subdomainPolicy"))


@dataclass
class RollingUpdateConfiguration:
    """Limits on unavailable and surplus replicas during a rolling update."""

    max_unavailable: IntOrString = field(default_factory=IntOrString)
    max_surge: IntOrString = field(default_factory=IntOrString)

    def _to_json(self) -> Dict[str, Any]:
        return {
            "maxUnavailable": self.max_unavailable.to_json(),
            "maxSurge": self.max_surge.to_json(),
        }

    @classmethod
    def _from_json(cls, data: Any) -> "RollingUpdateConfiguration":
        data = _mapping(data, "rollingUpdateConfiguration")
        return cls(
            max_unavailable=IntOrString.from_json(data.get("maxUnavailable", 0)),
            max_surge=IntOrString.from_json(data.get("maxSurge", 0)),
        )


@dataclass
class RolloutStrategy:
    """The strategy used to roll out template changes."""

    type: Optional[RolloutStrategyType] = None
    rolling_update_configuration: Optional[RollingUpdateConfiguration] = None

    def _to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": _enum_text(self.type)}
        if self.rolling_update_configuration is not None:
            out["rollingUpdateConfiguration"] = self.rolling_update_configuration._to_json()
        return out

    @classmethod
    def _from_json(cls, data: Any) -> "RolloutStrategy":
        data = _mapping(data, "rolloutStrategy")
        ruc = data.get("rollingUpdateConfiguration")
        return cls(
            type=_enum(RolloutStrategyType, data.get("type"), "rollout strategy type"),
            rolling_update_configuration=(
                None if ruc is None else RollingUpdateConfiguration._from_json(ruc)
            ),
        )


@dataclass
class LeaderWorkerTemplate:
    """Pod templates and sizing of one group; pod templates are plain mappings."""

    leader_template: Optional[Dict[str, Any]] = None
    worker_template: Dict[str, Any] = field(default_factory=dict)
    size: Optional[int] = None
    restart_policy: Optional[RestartPolicyType] = None
    sub_group_policy: Optional[SubGroupPolicy] = None

    def _to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.leader_template is not None:
            out["leaderTemplate"] = copy.deepcopy(self.leader_template)
        out["workerTemplate"] = copy.deepcopy(self.worker_template)
        if self.size is not None:
            out["size"] = self.size
        if self.restart_policy is not None:
            out["restartPolicy"] = self.restart_policy.value
        if self.sub_group_policy is not None:
            out["subGroupPolicy"] = self.sub_group_policy._to_json()
        return out

    @classmethod
    def _from_json(cls, data: Any) -> "LeaderWorkerTemplate":
        data = _mapping(data, "leaderWorkerTemplate")
        leader = data.get("leaderTemplate")
        sgp = data.get("subGroupPolicy")
        return cls(
            leader_template=None if leader is None else copy.deepcopy(dict(_mapping(leader, "leaderTemplate"))),
            worker_template=copy.deepcopy(dict(_mapping(data.get("workerTemplate"), "workerTemplate"))),
            size=_opt_int(data, "size"),
            restart_policy=_enum(RestartPolicyType, data.get("restartPolicy"), "restartPolicy"),
            sub_group_policy=None if sgp is None else SubGroupPolicy._from_json(sgp),
        )


@dataclass
class LeaderWorkerSetSpec:
    """The desired state of a LeaderWorkerSet."""

    replicas: Optional[int] = None
    leader_worker_template: LeaderWorkerTemplate = field(default_factory=LeaderWorkerTemplate)
    rollout_strategy: RolloutStrategy = field(default_factory=RolloutStrategy)
    startup_policy: Optional[StartupPolicyType] = None
    network_config: Optional[NetworkConfig] = None

    def _to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.replicas is not None:
            out["replicas"] = self.replicas
        out["leaderWorkerTemplate"] = self.leader_worker_template._to_json()
        out["rolloutStrategy"] = self.rollout_strategy._to_json()
        out["startupPolicy"] = _enum_text(self.startup_policy)
        if self.network_config is not None:
            out["networkConfig"] = self.network_config._to_json()
        return out

    @classmethod
    def _from_json(cls, data: Any) -> "LeaderWorkerSetSpec":
        data = _mapping(data, "spec")
        network = data.get("networkConfig")
        return cls(
            replicas=_opt_int(data, "replicas"),
            leader_worker_template=LeaderWorkerTemplate._from_json(data.get("leaderWorkerTemplate")),
            rollout_strategy=RolloutStrategy._from_json(data.get("rolloutStrategy")),
            startup_policy=_enum(StartupPolicyType, data.get("startupPolicy"), "startupPolicy"),
            network_config=None if network is None else NetworkConfig._from_json(network),
        )


@dataclass
class Condition:
    """One observed condition of an object."""

    type: str = ""
    status: str = ""
    observed_generation: int = 0
    last_transition_time: str = ""
    reason: str = ""
    message: str = ""

    def _to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": _text(self.type), "status": self.status}
        if self.observed_generation:
            out["observedGeneration"] = self.observed_generation
        out["lastTransitionTime"] = self.last_transition_time
        out["reason"] = self.reason
        out["message"] = self.message
        return out

    @classmethod
    def _from_json(cls, data: Any) -> "Condition":
        data = _mapping(data, "condition")
        generation = data.get("observedGeneration")
        return cls(
            type=_str(data, "type"),
            status=_str(data, "status"),
            observed_generation=0 if generation is None else _int(generation, "observedGeneration", int32=False),
            last_transition_time=_str(data, "lastTransitionTime"),
            reason=_str(data, "reason"),
            message=_str(data, "message"),
        )


@dataclass
class LeaderWorkerSetStatus:
    """The observed state of a LeaderWorkerSet."""

    conditions: List[Condition] = field(default_factory=list)
    ready_replicas: int = 0
    updated_replicas: int = 0
    replicas: int = 0
    hpa_pod_selector: str = ""

    def _to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.conditions:
            out["conditions"] = [c._to_json() for c in self.conditions]
        if self.ready_replicas:
            out["readyReplicas"] = self.ready_replicas
        if self.updated_replicas:
            out["updatedReplicas"] = self.updated_replicas
        if self.replicas:
            out["replicas"] = self.replicas
        if self.hpa_pod_selector:
            out["hpaPodSelector"] = self.hpa_pod_selector
        return out

    @classmethod
    def _from_json(cls, data: Any) -> "LeaderWorkerSetStatus":
        data = _mapping(data, "status")
        conditions = data.get("conditions") or []
        if not isinstance(conditions, list):
            raise TypeError("conditions must be a list")
        return cls(
            conditions=[Condition._from_json(c) for c in conditions],
            ready_replicas=_opt_int(data, "readyReplicas") or 0,
            updated_replicas=_opt_int(data, "updatedReplicas") or 0,
            replicas=_opt_int(data, "replicas") or 0,
            hpa_pod_selector=_str(data, "hpaPodSelector"),
        )


@dataclass
class ObjectMeta:
    """The metadata every stored object carries."""

    name: str = ""
    generate_name: str = ""
    namespace: str = ""
    uid: str = ""
    resource_version: str = ""
    generation: int = 0
    labels: Dict[str, str] = field(default_factory=dict)
    annotations: Dict[str, str] = field(default_factory=dict)
    finalizers: List[str] = field(default_factory=list)

    def _to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for key, value in (
            ("name", self.name),
            ("generateName", self.generate_name),
            ("namespace", self.namespace),
            ("uid", self.uid),
            ("resourceVersion", self.resource_version),
            ("generation", self.generation),
        ):
            if value:
                out[key] = value
        if self.labels:
            out["labels"] = dict(self.labels)
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        if self.finalizers:
            out["finalizers"] = list(self.finalizers)
        return out

    @classmethod
    def _from_json(cls, data: Any) -> "ObjectMeta":
        data = _mapping(data, "metadata")
        generation = data.get("generation")
        finalizers = data.get("finalizers") or []
        if not isinstance(finalizers, list):
            raise TypeError("finalizers must be a list")
        return cls(
            name=_str(data, "name"),
            generate_name=_str(data, "generateName"),
            namespace=_str(data, "namespace"),
            uid=_str(data, "uid"),
            resource_version=_str(data, "resourceVersion"),
            generation=0 if generation is None else _int(generation, "generation", int32=False),
            labels=dict(_mapping(data.get("labels"), "labels")),
            annotations=dict(_mapping(data.get("annotations"), "annotations")),
            finalizers=list(finalizers),
        )


@dataclass
class LeaderWorkerSet:
    """A set of leader/worker pod groups."""

    api_version: str = ""
    kind: str = ""
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: LeaderWorkerSetSpec = field(default_factory=LeaderWorkerSetSpec)
    status: LeaderWorkerSetStatus = field(default_factory=LeaderWorkerSetStatus)

    def to_dict(self) -> Dict[str, Any]:
        """Return the object in its JSON wire form."""
        out: Dict[str, Any] = {}
        if self.api_version:
            out["apiVersion"] = self.api_version
        if self.kind:
            out["kind"] = self.kind
        out["metadata"] = self.metadata._to_json()
        out["spec"] = self.spec._to_json()
        out["status"] = self.status._to_json()
        return out

    @staticmethod
    def from_dict(data: Any) -> "LeaderWorkerSet":
        """Build an object from its JSON wire form."""
        data = _mapping(data, "LeaderWorkerSet")
        return LeaderWorkerSet(
            api_version=_str(data, "apiVersion"),
            kind=_str(data, "kind"),
            metadata=ObjectMeta._from_json(data.get("metadata")),
            spec=LeaderWorkerSetSpec._from_json(data.get("spec")),
            status=LeaderWorkerSetStatus._from_json(data.get("status")),
        )


@dataclass
class LeaderWorkerSetList:
    """A list of LeaderWorkerSets."""

    api_version: str = ""
    kind: str = ""
    resource_version: str = ""
    continue_token: str = ""
    items: List[LeaderWorkerSet] = field(default_factory=list)


SCHEME_BUILDER = Builder(GROUP_VERSION).register(LeaderWorkerSet, LeaderWorkerSetList)


def add_to_scheme(scheme: Scheme) -> None:
    """Register the LeaderWorkerSet types with the scheme."""
    SCHEME_BUILDER.add_to_scheme(scheme)