from kube_console.containers import get_containers
from kube_console.probes import convert_probe
from kube_console.workload import WorkloadUnit


def test_empty_exec_command_is_omitted():
    """
    Regression test:
    An exec action with no command encodes as an empty method.
    """

    probe = convert_probe({"exec": {}})

    assert probe.to_dict()["handler"] == {"type": "EXEC", "method": {}}


def test_exec_command_kept_when_set():
    probe = convert_probe({"exec": {"command": ["true"]}})

    assert probe.to_dict()["handler"]["method"] == {"command": ["true"]}


def test_present_but_empty_security_context_and_lifecycle_are_written():
    """
    Regression test:
    securityContext / lifecycle set to {} upstream are written as {};
    only absent ones are omitted.
    """

    unit = WorkloadUnit(name="p")
    [empty, absent] = get_containers(
        unit,
        [
            {"name": "empty", "securityContext": {}, "lifecycle": {}},
            {"name": "absent"},
        ],
        [],
    )

    assert empty.to_dict()["securityContext"] == {}
    assert empty.to_dict()["lifecycle"] == {}
    assert "securityContext" not in absent.to_dict()
    assert "lifecycle" not in absent.to_dict()
