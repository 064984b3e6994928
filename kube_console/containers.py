import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from kube_console.envfrom import EnvSourceRef, convert_env_from
from kube_console.hints import UIHints, derive_hints
from kube_console.probes import ProbeBundle, convert_container_probe
from kube_console.volumes import (
    ResolvedMount,
    VolumeDescriptor,
    build_volume_index,
    describe_volumes,
    resolve_mounts,
)
from kube_console.workload import WorkloadUnit


@dataclass
class NormalizedContainer:
    """
    One container in console shape. Built fresh per conversion and holds
    lists, so it is not hashable.
    """

    name: str
    image: str = ""
    image_pull_policy: str = ""
    tty: bool = False
    command: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)
    working_dir: str = ""
    security_context: dict[str, Any] | None = None
    ports: list[dict[str, Any]] = field(default_factory=list)
    env: list[dict[str, Any]] = field(default_factory=list)
    env_from: list[EnvSourceRef] = field(default_factory=list)
    resources: dict[str, Any] = field(default_factory=dict)
    mounts: list[ResolvedMount] = field(default_factory=list)
    probe: ProbeBundle = field(default_factory=ProbeBundle)
    lifecycle: dict[str, Any] | None = None
    hints: UIHints = field(default_factory=UIHints)

    def to_dict(self) -> dict[str, Any]:
        """
        Console encoding. Empty optional fields are left out; the hint
        flags are always written.
        """
        data: dict[str, Any] = {
            "name": self.name,
            "image": self.image,
            "imagePullPolicy": self.image_pull_policy,
            "tty": self.tty,
            "command": list(self.command),
            "args": list(self.args),
        }
        if self.working_dir:
            data["workingDir"] = self.working_dir
        if self.security_context is not None:
            data["securityContext"] = copy.deepcopy(self.security_context)
        if self.ports:
            data["ports"] = copy.deepcopy(self.ports)
        if self.env:
            data["env"] = copy.deepcopy(self.env)
        if self.env_from:
            data["envFrom"] = [e.to_dict() for e in self.env_from]
        data["resources"] = copy.deepcopy(self.resources)
        if self.mounts:
            data["mounts"] = [m.to_dict() for m in self.mounts]
        data["probe"] = self.probe.to_dict()
        if self.lifecycle is not None:
            data["lifecycle"] = copy.deepcopy(self.lifecycle)
        data.update(self.hints.to_dict())
        return data


def _convert_container(
    unit: WorkloadUnit,
    container: dict[str, Any],
    index: dict[str, VolumeDescriptor],
    log: logging.Logger | None,
) -> NormalizedContainer:
    mounts = resolve_mounts(container.get("volumeMounts"), index)

    return NormalizedContainer(
        name=container.get("name", ""),
        image=container.get("image", ""),
        image_pull_policy=container.get("imagePullPolicy", ""),
        tty=bool(container.get("tty", False)),
        command=list(container.get("command") or []),
        args=list(container.get("args") or []),
        working_dir=container.get("workingDir", ""),
        security_context=copy.deepcopy(container.get("securityContext")),
        ports=copy.deepcopy(container.get("ports") or []),
        env=copy.deepcopy(container.get("env") or []),
        env_from=convert_env_from(container.get("envFrom")),
        resources=copy.deepcopy(container.get("resources") or {}),
        mounts=mounts,
        probe=convert_container_probe(
            container.get("livenessProbe"),
            container.get("readinessProbe"),
            log=log,
        ),
        lifecycle=copy.deepcopy(container.get("lifecycle")),
        hints=derive_hints(unit, container, mounts),
    )


# ----------------------------
# Container assembly
# ----------------------------


def get_containers(
    unit: WorkloadUnit,
    containers: list[dict[str, Any]] | None,
    volumes: list[VolumeDescriptor] | None,
    log: logging.Logger | None = None,
) -> list[NormalizedContainer]:
    """
    Convert every container of a workload unit, in declaration order.

    - Mounts are resolved against `volumes`; unknown volumes are dropped
    - Probes are flattened; a probe without a supported handler is logged
      on `log` and keeps an empty handler
    - Never raises on malformed per-container data
    """
    index = build_volume_index(volumes)
    return [
        _convert_container(unit, c or {}, index, log) for c in containers or []
    ]


def convert_pod(
    pod: dict[str, Any],
    volumes: list[VolumeDescriptor] | None = None,
    log: logging.Logger | None = None,
) -> dict[str, Any]:
    """
    Convert containers and init containers of a Pod or pod template.

    With `volumes` unset, descriptors are derived from the pod's own
    spec.volumes.
    """
    unit = WorkloadUnit.from_pod(pod)
    if volumes is None:
        volumes = describe_volumes(unit.volumes)

    return {
        "name": unit.name,
        "namespace": unit.namespace,
        "containers": get_containers(unit, unit.containers, volumes, log=log),
        "initContainers": get_containers(
            unit, unit.init_containers, volumes, log=log
        ),
    }
