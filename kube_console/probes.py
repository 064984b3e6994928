"""
Probe conversion.

A Kubernetes probe carries its action as one of several optional fields
(exec, httpGet, tcpSocket). The console wants a single tagged handler, so
each probe is flattened into one of the action types below. Resolution is
first-match in that same order.

Actions, probes and bundles hold lists, so they are plain (unhashable)
dataclasses. TCPSocketAction has only scalars and stays frozen.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

logger = logging.getLogger(__name__)


# ----------------------------
# Probe actions
# ----------------------------


@dataclass
class ExecAction:
    type: ClassVar[str] = "EXEC"

    command: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        if not self.command:
            return {}
        return {"command": list(self.command)}


@dataclass
class HTTPGetAction:
    type: ClassVar[str] = "HTTP"

    port: int | str
    path: str = ""
    host: str = ""
    scheme: str = ""
    headers: list[dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.path:
            data["path"] = self.path
        data["port"] = self.port
        if self.host:
            data["host"] = self.host
        if self.scheme:
            data["scheme"] = self.scheme
        if self.headers:
            data["headers"] = copy.deepcopy(self.headers)
        return data


@dataclass(frozen=True)
class TCPSocketAction:
    type: ClassVar[str] = "TCP"

    port: int | str
    host: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"port": self.port}
        if self.host:
            data["host"] = self.host
        return data


ProbeAction = Union[ExecAction, HTTPGetAction, TCPSocketAction]


@dataclass
class NormalizedProbe:
    # None when the upstream probe had no supported handler
    action: ProbeAction | None
    initial_delay_seconds: int = 0
    timeout_seconds: int = 0
    period_seconds: int = 0
    success_threshold: int = 0
    failure_threshold: int = 0

    def to_dict(self) -> dict[str, Any]:
        if self.action is None:
            handler: dict[str, Any] = {"type": ""}
        else:
            handler = {"type": self.action.type, "method": self.action.to_dict()}

        data: dict[str, Any] = {"handler": handler}
        if self.initial_delay_seconds:
            data["delay"] = self.initial_delay_seconds
        if self.timeout_seconds:
            data["timeout"] = self.timeout_seconds
        if self.period_seconds:
            data["period"] = self.period_seconds

        threshold = {}
        if self.success_threshold:
            threshold["success"] = self.success_threshold
        if self.failure_threshold:
            threshold["failure"] = self.failure_threshold
        data["threshold"] = threshold
        return data


@dataclass
class ProbeBundle:
    liveness: NormalizedProbe | None = None
    readiness: NormalizedProbe | None = None

    def to_dict(self) -> dict[str, Any]:
        data = {}
        if self.liveness is not None:
            data["liveness"] = self.liveness.to_dict()
        if self.readiness is not None:
            data["readiness"] = self.readiness.to_dict()
        return data


# ----------------------------
# Conversion
# ----------------------------


def convert_handler(
    probe: dict[str, Any], log: logging.Logger | None = None
) -> ProbeAction | None:
    exec_action = probe.get("exec")
    if exec_action is not None:
        return ExecAction(command=list(exec_action.get("command") or []))

    http_get = probe.get("httpGet")
    if http_get is not None:
        return HTTPGetAction(
            port=http_get.get("port", 0),
            path=http_get.get("path", ""),
            host=http_get.get("host", ""),
            scheme=http_get.get("scheme", ""),
            headers=copy.deepcopy(http_get.get("httpHeaders") or []),
        )

    tcp_socket = probe.get("tcpSocket")
    if tcp_socket is not None:
        return TCPSocketAction(
            port=tcp_socket.get("port", 0),
            host=tcp_socket.get("host", ""),
        )

    (log or logger).error("unsupported probe handler: %s", probe)
    return None


def convert_probe(
    probe: dict[str, Any], log: logging.Logger | None = None
) -> NormalizedProbe:
    return NormalizedProbe(
        action=convert_handler(probe, log=log),
        initial_delay_seconds=probe.get("initialDelaySeconds", 0),
        timeout_seconds=probe.get("timeoutSeconds", 0),
        period_seconds=probe.get("periodSeconds", 0),
        success_threshold=probe.get("successThreshold", 0),
        failure_threshold=probe.get("failureThreshold", 0),
    )


def convert_container_probe(
    liveness: dict[str, Any] | None,
    readiness: dict[str, Any] | None,
    log: logging.Logger | None = None,
) -> ProbeBundle:
    """
    Always returns a bundle; each side is set only when its probe exists.
    """
    return ProbeBundle(
        liveness=convert_probe(liveness, log=log) if liveness is not None else None,
        readiness=convert_probe(readiness, log=log) if readiness is not None else None,
    )
