import json
from typing import Any

import yaml

from kube_console.containers import NormalizedContainer

# ----------------------------
# Encoding
# ----------------------------


def encode_containers(containers: list[NormalizedContainer]) -> list[dict[str, Any]]:
    return [c.to_dict() for c in containers]


def encode_result(result: dict[str, Any]) -> dict[str, Any]:
    """
    Encode a convert_pod() result into JSON-compatible data.
    """
    return {
        "name": result["name"],
        "namespace": result["namespace"],
        "containers": encode_containers(result["containers"]),
        "initContainers": encode_containers(result["initContainers"]),
    }


# ----------------------------
# Output formatting
# ----------------------------


def _flags(data: dict[str, Any]) -> list[str]:
    return sorted(k.lstrip("_") for k, v in data.items() if k.startswith("__") and v)


def render_text(data: dict[str, Any]) -> str:
    lines = [f"Pod: {data['namespace']}/{data['name']}"]

    for section in ("initContainers", "containers"):
        for c in data.get(section, []):
            label = "Init container" if section == "initContainers" else "Container"
            lines.append(f"\n{label}: {c['name']}")
            lines.append(f"  Image: {c['image']}")
            if c["command"]:
                lines.append(f"  Command: {' '.join(c['command'])}")

            for m in c.get("mounts", []):
                kind = m.get("__kind") or "-"
                mode = "ro" if m.get("readonly") else "rw"
                lines.append(f"  Mount: {m['name']} -> {m['path']} ({kind}, {mode})")

            for e in c.get("envFrom", []):
                lines.append(f"  Env from: {e['type']}/{e['name']}")

            for side in ("liveness", "readiness"):
                probe = c["probe"].get(side)
                if probe is None:
                    continue
                handler = probe["handler"]
                lines.append(f"  {side.title()}: {handler['type'] or 'unsupported'}")

            flags = _flags(c)
            lines.append(f"  Flags: {', '.join(flags) if flags else 'none'}")

    return "\n".join(lines)


def render_result(data: dict[str, Any], fmt: str = "text") -> str:
    if fmt == "json":
        return json.dumps(data, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    return render_text(data)


def output_result(result: dict[str, Any], fmt: str = "text") -> None:
    print(render_result(encode_result(result), fmt))
