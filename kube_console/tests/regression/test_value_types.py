import pytest

from kube_console.envfrom import EnvSourceRef
from kube_console.hints import UIHints
from kube_console.probes import ExecAction, HTTPGetAction, TCPSocketAction
from kube_console.volumes import ResolvedMount, VolumeDescriptor


def test_scalar_value_types_are_hashable():
    """
    Regression test:
    Types holding only scalars are frozen and can be used in sets.
    """

    mounts = {
        ResolvedMount("data", "/data", kind="PVC"),
        ResolvedMount("data", "/data", kind="PVC"),
    }
    refs = {EnvSourceRef("Config", "c"), EnvSourceRef("Config", "c")}

    assert len(mounts) == 1
    assert len(refs) == 1
    assert len({VolumeDescriptor("d", "PVC"), TCPSocketAction(port=80)}) == 2
    assert hash(UIHints()) == hash(UIHints())


@pytest.mark.parametrize(
    "value",
    [ExecAction(command=["x"]), HTTPGetAction(port=80, headers=[])],
)
def test_list_holding_types_are_unhashable_but_compare_by_value(value):
    """
    Regression test:
    Types holding lists are plain dataclasses: equal by value, not hashable.
    """

    with pytest.raises(TypeError):
        hash(value)
    assert value == type(value)(**value.__dict__)
