from dataclasses import dataclass
from typing import Any

CONFIG = "Config"
SECRET = "Secret"


@dataclass(frozen=True)
class EnvSourceRef:
    kind: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "name": self.name}


def convert_env_from(env_from: list[dict[str, Any]] | None) -> list[EnvSourceRef]:
    """
    Flatten envFrom entries into (kind, name) references.

    configMapRef wins over secretRef; entries with neither are skipped.
    """
    refs: list[EnvSourceRef] = []
    for source in env_from or []:
        config_ref = source.get("configMapRef")
        secret_ref = source.get("secretRef")
        if config_ref is not None:
            refs.append(EnvSourceRef(kind=CONFIG, name=config_ref.get("name", "")))
        elif secret_ref is not None:
            refs.append(EnvSourceRef(kind=SECRET, name=secret_ref.get("name", "")))
    return refs
