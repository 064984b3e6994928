from dataclasses import dataclass
from typing import Any

from kube_console.volumes import ResolvedMount
from kube_console.workload import WorkloadUnit

LOG_FILES_ANNOTATION = "logging.caicloud.io/required-logfiles"


@dataclass(frozen=True)
class UIHints:
    """
    Display-only flags. Always encoded, always plain booleans.
    """

    is_env_custom: bool = False
    is_env_from: bool = False
    is_command: bool = False
    is_mount_file: bool = False
    is_log: bool = False
    liveness: bool = False
    readiness: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {
            "__isEnvCustom": self.is_env_custom,
            "__isEnvFrom": self.is_env_from,
            "__isCommand": self.is_command,
            "__isMountFile": self.is_mount_file,
            "__isLog": self.is_log,
            "__liveness": self.liveness,
            "__readiness": self.readiness,
        }


def is_env_custom(container: dict[str, Any] | None) -> bool:
    return bool(container and container.get("env"))


def is_env_from(container: dict[str, Any] | None) -> bool:
    return bool(container and container.get("envFrom"))


def is_command(container: dict[str, Any] | None) -> bool:
    return bool(container and container.get("command"))


def is_mount_file(mounts: list[ResolvedMount]) -> bool:
    return any(m.kind != "" for m in mounts)


def is_log(unit: WorkloadUnit | None) -> bool:
    if unit is None:
        return False
    return unit.has_annotation(LOG_FILES_ANNOTATION)


def has_liveness(container: dict[str, Any] | None) -> bool:
    if container is None:
        return False
    return container.get("livenessProbe") is not None


def has_readiness(container: dict[str, Any] | None) -> bool:
    if container is None:
        return False
    return container.get("readinessProbe") is not None


def derive_hints(
    unit: WorkloadUnit | None,
    container: dict[str, Any] | None,
    mounts: list[ResolvedMount],
) -> UIHints:
    return UIHints(
        is_env_custom=is_env_custom(container),
        is_env_from=is_env_from(container),
        is_command=is_command(container),
        is_mount_file=is_mount_file(mounts),
        is_log=is_log(unit),
        liveness=has_liveness(container),
        readiness=has_readiness(container),
    )
