import json
from typing import Any

# ----------------------------
# Parsing utilities
# ----------------------------


def load_json(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def get_pod_name(pod: dict[str, Any]) -> str:
    return (pod.get("metadata") or {}).get("name") or "<unknown>"


def get_pod_namespace(pod: dict[str, Any]) -> str:
    return (pod.get("metadata") or {}).get("namespace") or "default"


def get_pod_spec(obj: dict[str, Any]) -> dict[str, Any]:
    """
    Return the pod spec of a Pod, or of a workload carrying a pod template
    (Deployment, StatefulSet, DaemonSet, Job).
    """
    spec = obj.get("spec") or {}
    template = spec.get("template")
    if isinstance(template, dict):
        return template.get("spec") or {}
    return spec


def normalize_annotations(annotations: Any) -> list[tuple[str, str]]:
    """
    Accepts the Kubernetes mapping form or a list of {"key", "value"} entries
    and returns ordered (key, value) pairs.
    """
    if not annotations:
        return []
    if isinstance(annotations, dict):
        return [(str(k), str(v)) for k, v in annotations.items()]

    pairs = []
    for a in annotations:
        if isinstance(a, dict) and "key" in a:
            pairs.append((a["key"], a.get("value", "")))
        elif isinstance(a, (list, tuple)) and len(a) == 2:
            pairs.append((a[0], a[1]))
    return pairs
