from datetime import datetime, timezone

import pytest

from leaderworkerset.api import GROUP_VERSION
from leaderworkerset.applyconfig import (
    LeaderWorkerSetSpecApplyConfiguration,
    LeaderWorkerSetStatusApplyConfiguration,
    LeaderWorkerTemplateApplyConfiguration,
    NetworkConfigApplyConfiguration,
    RollingUpdateConfigurationApplyConfiguration,
    RolloutStrategyApplyConfiguration,
    SubGroupPolicyApplyConfiguration,
    leader_worker_set_spec,
    leader_worker_set_status,
)
from leaderworkerset.applyset import (
    LeaderWorkerSetApplyConfiguration,
    ObjectMetaApplyConfiguration,
    OwnerReferenceApplyConfiguration,
    for_kind,
    leader_worker_set,
)
from leaderworkerset.scheme import GroupVersion


def test_leader_worker_set_constructor_sets_identity():
    cfg = leader_worker_set("my-lws", "default")
    assert cfg.object_meta.name == "my-lws"
    assert cfg.object_meta.namespace == "default"
    assert cfg.kind == "LeaderWorkerSet"
    assert cfg.api_version == "leaderworkerset.x-k8s.io/v1"


def test_setters_chain_and_last_call_wins():
    cfg = LeaderWorkerSetApplyConfiguration()
    result = cfg.with_name("a").with_name("b").with_generate_name("g-")
    assert result is cfg
    assert cfg.object_meta.name == "b"
    assert cfg.object_meta.generate_name == "g-"


def test_metadata_fields():
    created = datetime(2024, 1, 2, tzinfo=timezone.utc)
    deleted = datetime(2024, 1, 3, tzinfo=timezone.utc)
    cfg = (
        LeaderWorkerSetApplyConfiguration()
        .with_uid("uid-1")
        .with_resource_version("42")
        .with_generation(7)
        .with_creation_timestamp(created)
        .with_deletion_timestamp(deleted)
        .with_deletion_grace_period_seconds(30)
    )
    meta = cfg.object_meta
    assert meta.uid == "uid-1"
    assert meta.resource_version == "42"
    assert meta.generation == 7
    assert meta.creation_timestamp == created
    assert meta.deletion_timestamp == deleted
    assert meta.deletion_grace_period_seconds == 30


def test_labels_merge_and_overwrite():
    cfg = LeaderWorkerSetApplyConfiguration()
    cfg.with_labels({"a": "1", "b": "2"}).with_labels({"b": "3", "c": "4"})
    assert cfg.object_meta.labels == {"a": "1", "b": "3", "c": "4"}


def test_empty_labels_leave_field_unset():
    cfg = LeaderWorkerSetApplyConfiguration().with_labels({})
    assert cfg.object_meta.labels is None


def test_annotations_merge():
    cfg = LeaderWorkerSetApplyConfiguration()
    cfg.with_annotations({"x": "1"}).with_annotations({"x": "2"})
    assert cfg.object_meta.annotations == {"x": "2"}
    assert LeaderWorkerSetApplyConfiguration().with_annotations({}).object_meta.annotations is None


def test_finalizers_append():
    cfg = LeaderWorkerSetApplyConfiguration()
    cfg.with_finalizers("f1", "f2").with_finalizers("f3")
    assert cfg.object_meta.finalizers == ["f1", "f2", "f3"]


def test_owner_references_are_copied_and_appended():
    ref = OwnerReferenceApplyConfiguration(kind="StatefulSet", name="owner")
    cfg = LeaderWorkerSetApplyConfiguration().with_owner_references(ref)
    ref.name = "changed"
    assert [r.name for r in cfg.object_meta.owner_references] == ["owner"]
    cfg.with_owner_references(OwnerReferenceApplyConfiguration(name="second"))
    assert len(cfg.object_meta.owner_references) == 2


def test_owner_references_reject_none():
    cfg = LeaderWorkerSetApplyConfiguration()
    with pytest.raises(ValueError):
        cfg.with_owner_references(OwnerReferenceApplyConfiguration(name="ok"), None)


def test_spec_and_status():
    spec = leader_worker_set_spec().with_replicas(3)
    status = leader_worker_set_status().with_ready_replicas(2)
    cfg = leader_worker_set("n", "ns").with_spec(spec).with_status(status)
    assert cfg.spec.replicas == 3
    assert cfg.status.ready_replicas == 2
    assert cfg.with_spec(None).spec is None


def test_get_name_creates_metadata():
    cfg = LeaderWorkerSetApplyConfiguration()
    assert cfg.get_name() is None
    assert isinstance(cfg.object_meta, ObjectMetaApplyConfiguration)
    cfg.with_name("x")
    assert cfg.get_name() == "x"


def test_type_errors():
    cfg = LeaderWorkerSetApplyConfiguration()
    with pytest.raises(TypeError):
        cfg.with_generation("1")
    with pytest.raises(TypeError):
        cfg.with_creation_timestamp("2024-01-01")
    with pytest.raises(TypeError):
        cfg.with_name(5)


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("LeaderWorkerSet", LeaderWorkerSetApplyConfiguration),
        ("LeaderWorkerSetSpec", LeaderWorkerSetSpecApplyConfiguration),
        ("LeaderWorkerSetStatus", LeaderWorkerSetStatusApplyConfiguration),
        ("LeaderWorkerTemplate", LeaderWorkerTemplateApplyConfiguration),
        ("NetworkConfig", NetworkConfigApplyConfiguration),
        ("RollingUpdateConfiguration", RollingUpdateConfigurationApplyConfiguration),
        ("RolloutStrategy", RolloutStrategyApplyConfiguration),
        ("SubGroupPolicy", SubGroupPolicyApplyConfiguration),
    ],
)
def test_for_kind_known(kind, expected):
    result = for_kind(GROUP_VERSION.with_kind(kind))
    assert type(result) is expected
    assert result == expected()


def test_for_kind_returns_fresh_instances():
    gvk = GROUP_VERSION.with_kind("LeaderWorkerSet")
    first = for_kind(gvk)
    assert first is not for_kind(gvk)
    first.with_name("a")
    assert for_kind(gvk).object_meta is None


def test_for_kind_unknown():
    assert for_kind(GROUP_VERSION.with_kind("Pod")) is None
    assert for_kind(GroupVersion("other.io", "v1").with_kind("LeaderWorkerSet")) is None