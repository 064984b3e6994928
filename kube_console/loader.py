import json
import os
from typing import Any

import yaml

from kube_console.model import get_pod_spec
from kube_console.volumes import VolumeDescriptor, volume_kind

# ----------------------------
# Volume descriptor loader
# ----------------------------


def _descriptor(item: dict[str, Any]) -> VolumeDescriptor:
    if "kind" in item:
        kind = item["kind"]
    elif "__kind" in item:
        kind = item["__kind"]
    else:
        # raw Kubernetes volume, e.g. copied from a pod spec
        kind = volume_kind(item)
    return VolumeDescriptor(name=item["name"], kind=kind or "")


def validate_volume(item: Any) -> None:
    if not isinstance(item, dict):
        raise ValueError(f"Volume entry must be a dict, got {type(item).__name__}")

    name = item.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError(f"Volume {item} must have a non-empty string 'name'")

    for key in ("kind", "__kind"):
        if key in item and item[key] is not None and not isinstance(item[key], str):
            raise ValueError(f"Volume {name}.{key} must be a string")


def build_volume_descriptors(spec: Any) -> list[VolumeDescriptor]:
    """
    Accepts either a single dict or a list of dicts.
    Returns a list of VolumeDescriptor instances.
    """
    if not spec:
        return []
    if isinstance(spec, dict):
        # a whole Pod: describe its own volumes
        if "spec" in spec:
            spec = get_pod_spec(spec).get("volumes") or []
        else:
            spec = [spec]
    if not isinstance(spec, list):
        raise ValueError("Volume content must be a dict or a list of dicts")

    descriptors = []
    for item in spec:
        validate_volume(item)
        descriptors.append(_descriptor(item))
    return descriptors


def load_volumes(path: str) -> list[VolumeDescriptor]:
    ext = os.path.splitext(path)[1].lower()
    with open(path, encoding="utf-8") as f:
        if ext == ".json":
            spec = json.load(f)
        elif ext in (".yaml", ".yml"):
            spec = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported volume file type: {path}")
    return build_volume_descriptors(spec)
