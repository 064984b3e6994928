from dataclasses import dataclass
from typing import Any

# Volume source key -> console display kind, checked in this order
VOLUME_KINDS = (
    ("persistentVolumeClaim", "PVC"),
    ("configMap", "Config"),
    ("secret", "Secret"),
    ("hostPath", "HostPath"),
    ("emptyDir", "EmptyDir"),
)


@dataclass(frozen=True)
class VolumeDescriptor:
    name: str
    kind: str = ""


@dataclass(frozen=True)
class ResolvedMount:
    name: str
    mount_path: str
    read_only: bool = False
    sub_path: str = ""
    kind: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.read_only:
            data["readonly"] = True
        data["path"] = self.mount_path
        if self.sub_path:
            data["subpath"] = self.sub_path
        if self.kind:
            data["__kind"] = self.kind
        return data


# ----------------------------
# Volume descriptors
# ----------------------------


def volume_kind(volume: dict[str, Any]) -> str:
    """
    Display kind of a raw Kubernetes volume, "" for sources the console
    does not label.
    """
    for source, kind in VOLUME_KINDS:
        if volume.get(source) is not None:
            return kind
    return ""


def describe_volumes(volumes: list[dict[str, Any]] | None) -> list[VolumeDescriptor]:
    descriptors = []
    for v in volumes or []:
        name = v.get("name")
        if not name:
            continue
        descriptors.append(VolumeDescriptor(name=name, kind=volume_kind(v)))
    return descriptors


def build_volume_index(
    volumes: list[VolumeDescriptor] | None,
) -> dict[str, VolumeDescriptor]:
    """
    Map volume name -> descriptor. Duplicate names: last one wins.
    """
    index: dict[str, VolumeDescriptor] = {}
    for v in volumes or []:
        index[v.name] = v
    return index


# ----------------------------
# Mount resolution
# ----------------------------


def resolve_mounts(
    mounts: list[dict[str, Any]] | None,
    index: dict[str, VolumeDescriptor],
) -> list[ResolvedMount]:
    """
    Join raw volumeMounts against the volume index.

    Mounts whose volume is not in the index are dropped, keeping the
    order of the remaining ones.
    """
    resolved = []
    for m in mounts or []:
        name = m.get("name", "")
        volume = index.get(name)
        if volume is None:
            continue
        resolved.append(
            ResolvedMount(
                name=name,
                mount_path=m.get("mountPath", ""),
                read_only=bool(m.get("readOnly", False)),
                sub_path=m.get("subPath", ""),
                kind=volume.kind,
            )
        )
    return resolved
