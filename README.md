# leaderworkerset

A Python data model for LeaderWorkerSet workloads. Such a workload runs groups
of pods. Each group has one leader and a number of workers, and the whole
group is replicated as a unit.

The package has no dependencies outside the standard library.

## Modules

- `leaderworkerset.scheme` provides the identifiers `GroupVersion`,
  `GroupVersionKind`, `GroupVersionResource` and `GroupResource`. It also
  provides a `Scheme`, which maps kinds to Python types, and a `Builder`,
  which collects registrations and applies them to a scheme. A lookup of an
  unknown kind with `Scheme.type_for` raises `NotRegisteredError`.
- `leaderworkerset.config` provides the controller manager `Configuration`
  together with its parts: `ControllerManager`, `ControllerWebhook`,
  `ControllerMetrics`, `ControllerHealth`, `LeaderElectionConfiguration`,
  `InternalCertManagement` and `ClientConnection`.
  `set_defaults_configuration` fills in every unset field, in place.
- `leaderworkerset.api` provides the `LeaderWorkerSet` resource with its
  spec, status, templates and rollout strategy. It also has the policy enums
  `SubdomainPolicy`, `RestartPolicyType`, `StartupPolicyType` and
  `RolloutStrategyType`, the `IntOrString` value type, and the well-known
  label, annotation and environment variable names. `LeaderWorkerSet.to_dict`
  and `LeaderWorkerSet.from_dict` convert to and from the JSON wire form.
- `leaderworkerset.applyconfig` provides chainable apply configurations for
  the parts of a LeaderWorkerSet: spec, status, template, rollout strategy,
  rolling update, network config and subgroup policy.
- `leaderworkerset.applyset` provides the apply configuration for a whole
  object, `leader_worker_set(name, namespace)`, and `for_kind`.

## Installation

```
pip install leaderworkerset
```

## Defaulting a configuration

```python
from leaderworkerset.config import Configuration, set_defaults_configuration

cfg = Configuration()
set_defaults_configuration(cfg)
print(cfg.controller_manager.webhook.port)                   # 9443
print(cfg.controller_manager.leader_election.resource_name)  # b8b2488c.x-k8s.io
print(cfg.internal_cert_management.webhook_service_name)     # lws-webhook-service
```

Fields that are already set are left as they are. Certificate-management
names are filled in only when `internal_cert_management.enable` is true or
unset.

## Reading and writing objects

```python
from leaderworkerset.api import LeaderWorkerSet, SubdomainPolicy

lws = LeaderWorkerSet.from_dict({
    "metadata": {"name": "my-lws", "namespace": "default"},
    "spec": {
        "replicas": 2,
        "leaderWorkerTemplate": {"size": 4, "workerTemplate": {}},
        "networkConfig": {"subdomainPolicy": "Shared"},
    },
})
assert lws.spec.network_config.subdomain_policy is SubdomainPolicy.SHARED
data = lws.to_dict()
```

An unknown enum value raises `ValueError`. A field of the wrong type raises
`TypeError`.

## Building an apply configuration

```python
from leaderworkerset.applyset import leader_worker_set
from leaderworkerset.applyconfig import leader_worker_set_spec, leader_worker_template

lws = (
    leader_worker_set("my-lws", "default")
    .with_labels({"app": "demo"})
    .with_spec(
        leader_worker_set_spec()
        .with_replicas(2)
        .with_leader_worker_template(leader_worker_template().with_size(4))
    )
)
print(lws.get_name())  # my-lws
```

`for_kind` takes a `GroupVersionKind` and returns a new, empty apply
configuration for it. It returns `None` for kinds it does not know.

## What this package does not do

This package is a data model only. It does not talk to a cluster API server.
It has no typed client, informers, listers or watch support, and it does not
run a controller, a webhook server or a command-line tool. Pod templates are
kept as plain dictionaries and are not validated.

## Running the tests

```
pip install -e ".[test]"
pytest
```