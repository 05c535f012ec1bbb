import json

import pytest

from leaderworkerset.api import (
    GROUP_VERSION,
    SCHEME_BUILDER,
    Condition,
    IntOrString,
    LeaderWorkerSet,
    LeaderWorkerSetConditionType,
    LeaderWorkerSetList,
    LeaderWorkerSetSpec,
    LeaderWorkerSetStatus,
    LeaderWorkerTemplate,
    NetworkConfig,
    ObjectMeta,
    RestartPolicyType,
    RollingUpdateConfiguration,
    RolloutStrategy,
    RolloutStrategyType,
    StartupPolicyType,
    SubdomainPolicy,
    SubGroupPolicy,
    add_to_scheme,
    resource,
)
from leaderworkerset.scheme import GroupResource, Scheme


def _full_lws():
    return LeaderWorkerSet(
        api_version=str(GROUP_VERSION),
        kind="LeaderWorkerSet",
        metadata=ObjectMeta(
            name="demo",
            namespace="default",
            labels={"app": "demo"},
            annotations={"note": "x"},
            finalizers=["keep"],
            generation=2,
        ),
        spec=LeaderWorkerSetSpec(
            replicas=3,
            leader_worker_template=LeaderWorkerTemplate(
                leader_template={"spec": {"containers": [{"name": "leader"}]}},
                worker_template={"spec": {"containers": [{"name": "worker"}]}},
                size=4,
                restart_policy=RestartPolicyType.RECREATE_GROUP_ON_POD_RESTART,
                sub_group_policy=SubGroupPolicy(sub_group_size=2),
            ),
            rollout_strategy=RolloutStrategy(
                type=RolloutStrategyType.ROLLING_UPDATE,
                rolling_update_configuration=RollingUpdateConfiguration(
                    max_unavailable=IntOrString("30%"), max_surge=IntOrString(1)
                ),
            ),
            startup_policy=StartupPolicyType.LEADER_READY,
            network_config=NetworkConfig(subdomain_policy=SubdomainPolicy.UNIQUE_PER_REPLICA),
        ),
        status=LeaderWorkerSetStatus(
            conditions=[Condition(type="Available", status="True", reason="ok")],
            ready_replicas=1,
            updated_replicas=2,
            replicas=3,
            hpa_pod_selector="leaderworkerset.sigs.k8s.io/name=demo",
        ),
    )


def test_resource_is_qualified_with_group():
    gr = resource("leaderworkersets")
    assert gr == GroupResource("leaderworkerset.x-k8s.io", "leaderworkersets")


def test_scheme_builder_registers_both_kinds():
    scheme = SCHEME_BUILDER.build()
    assert scheme.type_for(GROUP_VERSION.with_kind("LeaderWorkerSet")) is LeaderWorkerSet
    assert scheme.type_for(GROUP_VERSION.with_kind("LeaderWorkerSetList")) is LeaderWorkerSetList


def test_add_to_scheme_uses_group_version():
    scheme = Scheme()
    add_to_scheme(scheme)
    assert set(scheme.known_types(GROUP_VERSION)) == {"LeaderWorkerSet", "LeaderWorkerSetList"}


@pytest.mark.parametrize("value", [3, "30%"])
def test_int_or_string_round_trip(value):
    ios = IntOrString.from_json(value)
    assert ios.to_json() == value
    assert ios.is_int == isinstance(value, int)


@pytest.mark.parametrize("bad", [True, 1.5, None, [1]])
def test_int_or_string_rejects_other_types(bad):
    with pytest.raises(TypeError):
        IntOrString.from_json(bad)


def test_int_or_string_rejects_out_of_range():
    with pytest.raises(ValueError):
        IntOrString(2**31)


def test_enum_values_match_wire_strings():
    assert RestartPolicyType("None") is RestartPolicyType.NONE
    assert RestartPolicyType("Default") is RestartPolicyType.DEPRECATED_DEFAULT
    assert StartupPolicyType("LeaderCreated") is StartupPolicyType.LEADER_CREATED
    assert LeaderWorkerSetConditionType("UpdateInProgress") is LeaderWorkerSetConditionType.UPDATE_IN_PROGRESS


def test_empty_object_wire_form_follows_omitempty():
    d = LeaderWorkerSet().to_dict()
    assert set(d) == {"metadata", "spec", "status"}
    assert d["metadata"] == {}
    assert d["status"] == {}
    assert "replicas" not in d["spec"]
    assert "networkConfig" not in d["spec"]
    assert d["spec"]["startupPolicy"] == ""
    assert d["spec"]["rolloutStrategy"] == {"type": ""}
    assert d["spec"]["leaderWorkerTemplate"] == {"workerTemplate": {}}


def test_full_object_round_trip():
    lws = _full_lws()
    assert LeaderWorkerSet.from_dict(lws.to_dict()) == lws


def test_round_trip_through_json_text():
    lws = _full_lws()
    text = json.dumps(lws.to_dict())
    assert LeaderWorkerSet.from_dict(json.loads(text)) == lws


def test_wire_form_uses_camel_case_and_enum_values():
    d = _full_lws().to_dict()
    template = d["spec"]["leaderWorkerTemplate"]
    assert template["size"] == 4
    assert template["restartPolicy"] == "RecreateGroupOnPodRestart"
    assert template["subGroupPolicy"] == {"subGroupSize": 2}
    assert d["spec"]["networkConfig"] == {"subdomainPolicy": "UniquePerReplica"}
    ruc = d["spec"]["rolloutStrategy"]["rollingUpdateConfiguration"]
    assert ruc == {"maxUnavailable": "30%", "maxSurge": 1}
    assert d["status"]["hpaPodSelector"] == "leaderworkerset.sigs.k8s.io/name=demo"


def test_network_config_without_policy_emits_null():
    lws = LeaderWorkerSet(spec=LeaderWorkerSetSpec(network_config=NetworkConfig()))
    d = lws.to_dict()
    assert d["spec"]["networkConfig"] == {"subdomainPolicy": None}
    assert LeaderWorkerSet.from_dict(d).spec.network_config == NetworkConfig()


def test_from_empty_mapping_gives_zero_object():
    assert LeaderWorkerSet.from_dict({}) == LeaderWorkerSet()


def test_rolling_update_defaults_to_zero_when_missing():
    lws = LeaderWorkerSet.from_dict({"spec": {"rolloutStrategy": {"rollingUpdateConfiguration": {}}}})
    ruc = lws.spec.rollout_strategy.rolling_update_configuration
    assert ruc == RollingUpdateConfiguration(IntOrString(0), IntOrString(0))


def test_unknown_restart_policy_is_rejected():
    with pytest.raises(ValueError):
        LeaderWorkerSet.from_dict({"spec": {"leaderWorkerTemplate": {"restartPolicy": "Sometimes"}}})


def test_unknown_subdomain_policy_is_rejected():
    with pytest.raises(ValueError):
        LeaderWorkerSet.from_dict({"spec": {"networkConfig": {"subdomainPolicy": "Other"}}})


def test_non_integer_replicas_is_rejected():
    with pytest.raises(TypeError):
        LeaderWorkerSet.from_dict({"spec": {"replicas": "3"}})


def test_non_mapping_input_is_rejected():
    with pytest.raises(TypeError):
        LeaderWorkerSet.from_dict(["spec"])


def test_to_dict_copies_pod_templates():
    lws = _full_lws()
    d = lws.to_dict()
    d["spec"]["leaderWorkerTemplate"]["workerTemplate"]["spec"]["containers"][0]["name"] = "changed"
    assert lws.spec.leader_worker_template.worker_template["spec"]["containers"][0]["name"] == "worker"


def test_condition_with_enum_type_serialises_as_string():
    status = LeaderWorkerSetStatus(
        conditions=[Condition(type=LeaderWorkerSetConditionType.PROGRESSING, status="True")]
    )
    d = LeaderWorkerSet(status=status).to_dict()
    assert d["status"]["conditions"][0]["type"] == "Progressing"
    assert "observedGeneration" not in d["status"]["conditions"][0]
    back = LeaderWorkerSet.from_dict(d)
    assert back.status.conditions[0].type == LeaderWorkerSetConditionType.PROGRESSING.value