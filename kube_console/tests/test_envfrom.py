from kube_console.envfrom import EnvSourceRef, convert_env_from


def test_config_and_secret_sources():
    refs = convert_env_from(
        [
            {"configMapRef": {"name": "app-config"}},
            {"secretRef": {"name": "app-secret"}, "prefix": "S_"},
        ]
    )

    assert refs == [
        EnvSourceRef(kind="Config", name="app-config"),
        EnvSourceRef(kind="Secret", name="app-secret"),
    ]


def test_entry_without_source_is_skipped():
    sources = [{"prefix": "X_"}, {"secretRef": {"name": "s"}}]

    refs = convert_env_from(sources)

    assert len(refs) <= len(sources)
    assert refs == [EnvSourceRef(kind="Secret", name="s")]


def test_config_ref_takes_precedence():
    refs = convert_env_from(
        [{"configMapRef": {"name": "c"}, "secretRef": {"name": "s"}}]
    )

    assert refs == [EnvSourceRef(kind="Config", name="c")]


def test_missing_list_is_empty_not_none():
    assert convert_env_from(None) == []
    assert convert_env_from([]) == []


def test_encoding():
    assert EnvSourceRef("Config", "c").to_dict() == {"type": "Config", "name": "c"}
