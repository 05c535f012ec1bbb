"""Controller manager configuration and its defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from .scheme import Builder, GroupVersion

DEFAULT_WEBHOOK_CERT_DIR = "/tmp/k8s-webhook-server/serving-certs"
DEFAULT_WEBHOOK_SERVICE_NAME = "lws-webhook-service"
DEFAULT_WEBHOOK_SECRET_NAME = "lws-webhook-server-cert"
DEFAULT_WEBHOOK_PORT = 9443
DEFAULT_HEALTH_PROBE_BIND_ADDRESS = ":8081"
DEFAULT_READINESS_ENDPOINT = "/readyz"
DEFAULT_LIVENESS_ENDPOINT = "/healthz"
DEFAULT_METRICS_BIND_ADDRESS = ":8443"
DEFAULT_LEADER_ELECTION_ID = "b8b2488c.x-k8s.io"
DEFAULT_RESOURCE_LOCK = "leases"
DEFAULT_CLIENT_CONNECTION_QPS = 500.0
DEFAULT_CLIENT_CONNECTION_BURST = 500

DEFAULT_LEASE_DURATION = timedelta(seconds=15)
DEFAULT_RENEW_DEADLINE = timedelta(seconds=10)
DEFAULT_RETRY_PERIOD = timedelta(seconds=2)


@dataclass
class LeaderElectionConfiguration:
    """Leader election settings for the manager."""

    leader_elect: Optional[bool] = None
    lease_duration: timedelta = field(default_factory=timedelta)
    renew_deadline: timedelta = field(default_factory=timedelta)
    retry_period: timedelta = field(default_factory=timedelta)
    resource_lock: str = ""
    resource_name: str = ""
    resource_namespace: str = ""


@dataclass
class ControllerWebhook:
    """Webhook server settings."""

    port: Optional[int] = None
    host: str = ""
    cert_dir: str = ""


@dataclass
class ControllerMetrics:
    """Metrics server settings; a bind address of "0" disables serving."""

    bind_address: str = ""


@dataclass
class ControllerHealth:
    """Health probe settings."""

    health_probe_bind_address: str = ""
    readiness_endpoint_name: str = ""
    liveness_endpoint_name: str = ""


@dataclass
class ControllerManager:
    """Settings for the controller manager itself."""

    webhook: ControllerWebhook = field(default_factory=ControllerWebhook)
    leader_election: Optional[LeaderElectionConfiguration] = None
    metrics: ControllerMetrics = field(default_factory=ControllerMetrics)
    health: ControllerHealth = field(default_factory=ControllerHealth)


@dataclass
class InternalCertManagement:
    """Built-in certificate management for the webhook server."""

    enable: Optional[bool] = None
    webhook_service_name: Optional[str] = None
    webhook_secret_name: Optional[str] = None


@dataclass
class ClientConnection:
    """Rate limits for the connection to the API server."""

    qps: Optional[float] = None
    burst: Optional[int] = None


@dataclass
class Configuration:
    """Top-level component configuration."""

    api_version: str = ""
    kind: str = ""
    controller_manager: ControllerManager = field(default_factory=ControllerManager)
    internal_cert_management: Optional[InternalCertManagement] = None
    client_connection: Optional[ClientConnection] = None


GROUP_VERSION = GroupVersion("config.lws.x-k8s.io", "v1alpha1")
SCHEME_BUILDER = Builder(GROUP_VERSION).register(Configuration)
add_to_scheme = SCHEME_BUILDER.add_to_scheme


def recommended_default_leader_election_configuration(cfg: LeaderElectionConfiguration) -> None:
    """Fill unset leader election fields with the recommended values."""
    if cfg.lease_duration == timedelta(0):
        cfg.lease_duration = DEFAULT_LEASE_DURATION
    if cfg.renew_deadline == timedelta(0):
        cfg.renew_deadline = DEFAULT_RENEW_DEADLINE
    if cfg.retry_period == timedelta(0):
        cfg.retry_period = DEFAULT_RETRY_PERIOD
    if not cfg.resource_lock:
        cfg.resource_lock = DEFAULT_RESOURCE_LOCK
    if cfg.leader_elect is None:
        cfg.leader_elect = True


def set_defaults_configuration(cfg: Configuration) -> None:
    """Fill every unset field of the configuration with its default, in place."""
    manager = cfg.controller_manager
    if manager.webhook.port is None:
        manager.webhook.port = DEFAULT_WEBHOOK_PORT
    if not manager.webhook.cert_dir:
        manager.webhook.cert_dir = DEFAULT_WEBHOOK_CERT_DIR
    if not manager.metrics.bind_address:
        manager.metrics.bind_address = DEFAULT_METRICS_BIND_ADDRESS
    if not manager.health.health_probe_bind_address:
        manager.health.health_probe_bind_address = DEFAULT_HEALTH_PROBE_BIND_ADDRESS
    if not manager.health.liveness_endpoint_name:
        manager.health.liveness_endpoint_name = DEFAULT_LIVENESS_ENDPOINT
    if not manager.health.readiness_endpoint_name:
        manager.health.readiness_endpoint_name = DEFAULT_READINESS_ENDPOINT

    if manager.leader_election is None:
        manager.leader_election = LeaderElectionConfiguration()
    if not manager.leader_election.resource_name:
        manager.leader_election.resource_name = DEFAULT_LEADER_ELECTION_ID
    if not manager.leader_election.resource_lock:
        manager.leader_election.resource_lock = DEFAULT_RESOURCE_LOCK
    recommended_default_leader_election_configuration(manager.leader_election)

    if cfg.internal_cert_management is None:
        cfg.internal_cert_management = InternalCertManagement()
    certs = cfg.internal_cert_management
    if certs.enable is None:
        certs.enable = True
    if certs.enable:
        if certs.webhook_service_name is None:
            certs.webhook_service_name = DEFAULT_WEBHOOK_SERVICE_NAME
        if certs.webhook_secret_name is None:
            certs.webhook_secret_name = DEFAULT_WEBHOOK_SECRET_NAME

    if cfg.client_connection is None:
        cfg.client_connection = ClientConnection()
    if cfg.client_connection.qps is None:
        cfg.client_connection.qps = DEFAULT_CLIENT_CONNECTION_QPS
    if cfg.client_connection.burst is None:
        cfg.client_connection.burst = DEFAULT_CLIENT_CONNECTION_BURST