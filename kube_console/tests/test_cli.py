import json

import yaml

from kube_console.cli import main
from kube_console.hints import LOG_FILES_ANNOTATION

POD = {
    "metadata": {
        "name": "api-0",
        "namespace": "prod",
        "annotations": {LOG_FILES_ANNOTATION: "[]"},
    },
    "spec": {
        "volumes": [{"name": "conf", "configMap": {"name": "api"}}],
        "initContainers": [{"name": "wait", "image": "busybox"}],
        "containers": [
            {
                "name": "api",
                "image": "api:2",
                "command": ["/api"],
                "envFrom": [{"secretRef": {"name": "api-secrets"}}],
                "volumeMounts": [{"name": "conf", "mountPath": "/etc/api"}],
                "readinessProbe": {"httpGet": {"path": "/ready", "port": 9000}},
            }
        ],
    },
}


def _write_pod(tmp_path):
    path = tmp_path / "pod.json"
    path.write_text(json.dumps(POD))
    return str(path)


def test_json_output(tmp_path, capsys):
    main(["--pod", _write_pod(tmp_path), "--format", "json"])

    data = json.loads(capsys.readouterr().out)
    [api] = data["containers"]

    assert api["mounts"] == [{"name": "conf", "path": "/etc/api", "__kind": "Config"}]
    assert api["envFrom"] == [{"type": "Secret", "name": "api-secrets"}]
    assert api["probe"]["readiness"]["handler"]["type"] == "HTTP"
    assert api["__isLog"] is True
    assert api["__readiness"] is True
    assert api["__liveness"] is False
    assert [c["name"] for c in data["initContainers"]] == ["wait"]


def test_yaml_output_with_volume_file(tmp_path, capsys):
    volumes = tmp_path / "volumes.yaml"
    volumes.write_text(yaml.safe_dump([{"name": "conf", "kind": "Secret"}]))

    main(
        [
            "--pod",
            _write_pod(tmp_path),
            "--volumes",
            str(volumes),
            "--format",
            "yaml",
            "--no-init-containers",
        ]
    )

    data = yaml.safe_load(capsys.readouterr().out)

    assert data["containers"][0]["mounts"][0]["__kind"] == "Secret"
    assert data["initContainers"] == []


def test_text_output(tmp_path, capsys):
    main(["--pod", _write_pod(tmp_path)])

    out = capsys.readouterr().out

    assert "Pod: prod/api-0" in out
    assert "Container: api" in out
    assert "Init container: wait" in out
    assert "Mount: conf -> /etc/api (Config, rw)" in out
    assert "Env from: Secret/api-secrets" in out
    assert "Readiness: HTTP" in out
