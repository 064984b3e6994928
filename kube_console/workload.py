from dataclasses import dataclass, field
from typing import Any

from kube_console.model import (
    get_pod_name,
    get_pod_namespace,
    get_pod_spec,
    normalize_annotations,
)


@dataclass
class WorkloadUnit:
    """
    Read-only view of a pod (or pod template) as seen by the converter.

    Containers and volumes are the raw upstream dicts; the unit never
    copies or mutates them. Not hashable.
    """

    name: str
    namespace: str = "default"
    annotations: list[tuple[str, str]] = field(default_factory=list)
    containers: list[dict[str, Any]] = field(default_factory=list)
    init_containers: list[dict[str, Any]] = field(default_factory=list)
    volumes: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_pod(cls, pod: dict[str, Any]) -> "WorkloadUnit":
        metadata = pod.get("metadata") or {}
        spec = get_pod_spec(pod)

        # pod templates carry their own annotations
        template = (pod.get("spec") or {}).get("template")
        if isinstance(template, dict):
            annotations = (template.get("metadata") or {}).get("annotations")
        else:
            annotations = metadata.get("annotations")

        return cls(
            name=get_pod_name(pod),
            namespace=get_pod_namespace(pod),
            annotations=normalize_annotations(annotations),
            containers=list(spec.get("containers") or []),
            init_containers=list(spec.get("initContainers") or []),
            volumes=list(spec.get("volumes") or []),
        )

    def has_annotation(self, key: str) -> bool:
        return any(k == key for k, _ in self.annotations)
