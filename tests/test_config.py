import pytest

from staging_planner.config import DEFAULT_CONFIG_YAML, PlanConfig, load_config, load_config_path
from staging_planner.errors import PlanConfigError


def test_default_yaml_matches_defaults():
    assert load_config(DEFAULT_CONFIG_YAML) == PlanConfig()


def test_empty_config_uses_defaults():
    assert load_config("") == PlanConfig()


def test_settings_and_aliases(tmp_path):
    path = tmp_path / "plan.yaml"
    path.write_text(
        "plan:\n"
        "  discard_missing_fnsku: true\n"
        "  sort: false\n"
        "  expand: true\n"
        "  header_aliases:\n"
        "    Staging Lane: staging_group\n",
        encoding="utf-8",
    )
    config = load_config_path(path)
    assert config.discard_missing_fnsku is True
    assert config.sort is False
    assert config.expand is True
    assert config.alias_table()["staginglane"] == "staging_group"
    assert config.builder_options()["discard_missing_fnsku"] is True


@pytest.mark.parametrize(
    "text",
    [
        "plan:\n  expand: maybe\n",
        "plan:\n  shuffle: true\n",
        "plan:\n  header_aliases:\n    Lane: lane\n",
        "plan:\n  header_aliases: [a, b]\n",
        "- just\n- a list\n",
        "plan: [1, 2]\n",
        "plan: {expand: true\n",
    ],
)
def test_bad_config_is_rejected(text):
    with pytest.raises(PlanConfigError):
        load_config(text)
