"""Tests for run configuration."""
import pytest

from directus_typegen.cli.config import TypegenConfig, load_config
from directus_typegen.core.defs import GeneratorOptions
from directus_typegen.core.errors import ConfigError


class TestTypegenConfig:

    def test_defaults(self):
        config = TypegenConfig()
        assert config.host == "http://0.0.0.0:8055"
        assert config.type_name == "DirectusTypes"
        assert config.out_file == "directus.ts"
        assert config.legacy is False

    def test_from_dict_accepts_camel_case(self):
        config = TypegenConfig.from_dict({
            "host": "http://cms:8055",
            "typeName": "MyCollections",
            "outFile": "src/types.ts",
            "newTypes": True,
        })
        assert config.type_name == "MyCollections"
        assert config.out_file == "src/types.ts"
        assert config.new_types is True

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigError):
            TypegenConfig.from_dict({"hots": "http://cms:8055"})

    def test_merge_skips_none(self):
        config = TypegenConfig(email="a@example.com").merge({"email": None, "legacy": True})
        assert config.email == "a@example.com"
        assert config.legacy is True

    def test_validate_requires_credentials(self):
        with pytest.raises(ConfigError):
            TypegenConfig(email="a@example.com").validate()
        TypegenConfig(token="static").validate()
        TypegenConfig(email="a@example.com", password="secret").validate()

    def test_validate_type_name(self):
        with pytest.raises(ConfigError):
            TypegenConfig(token="static", type_name="My Types").validate()

    def test_to_options(self):
        config = TypegenConfig(type_name="Schema", legacy=True)
        assert config.to_options() == GeneratorOptions(type_name="Schema", legacy=True, new_types=False)


class TestLoadConfig:

    def test_missing_default_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config() == TypegenConfig()

    def test_default_file_is_read(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "directus-typegen.yaml").write_text("host: http://cms:8055\ntype_name: Cms\n")
        config = load_config()
        assert config.host == "http://cms:8055"
        assert config.type_name == "Cms"

    def test_explicit_missing_file_is_an_error(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == TypegenConfig()

    def test_non_mapping_is_an_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_yaml_is_an_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("host: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(path)
