"""Tests for configuration layering."""

from pathlib import Path

from tiercache.config import hierarchy
from tiercache.config.defaults import DEFAULT_MEMORY_COUNT_LIMIT, get_defaults
from tiercache.config.hierarchy import load_config_hierarchy
from tiercache.config.schema import CacheConfig


class TestDefaults:
    def test_get_defaults_keys(self):
        defaults = get_defaults()
        assert defaults["memory_count_limit"] == 100
        assert defaults["memory_cost_limit_mb"] == 50.0
        assert defaults["image_quality"] == 80
        assert defaults["codec"] == "image"


class TestLoadConfigHierarchy:
    def test_defaults_when_nothing_set(self):
        config = load_config_hierarchy()
        assert config == get_defaults()

    def test_global_config_applied(self, tmp_path):
        (tmp_path / "global-config.yaml").write_text("memory_count_limit: 5\n")
        config = load_config_hierarchy()
        assert config["memory_count_limit"] == 5

    def test_project_config_overrides_global(self, tmp_path):
        (tmp_path / "global-config.yaml").write_text("memory_count_limit: 5\n")
        (tmp_path / "tiercache.yaml").write_text("memory_count_limit: 7\ncodec: bytes\n")
        config = load_config_hierarchy()
        assert config["memory_count_limit"] == 7
        assert config["codec"] == "bytes"

    def test_project_config_found_in_parent(self, tmp_path, monkeypatch):
        (tmp_path / "tiercache.yaml").write_text("image_quality: 60\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_config_hierarchy()["image_quality"] == 60

    def test_env_overrides_files(self, tmp_path, monkeypatch):
        (tmp_path / "tiercache.yaml").write_text("memory_count_limit: 7\n")
        monkeypatch.setenv("TIERCACHE_MEMORY_COUNT_LIMIT", "9")
        monkeypatch.setenv("TIERCACHE_DIR", "/var/cache/images")
        config = load_config_hierarchy()
        assert config["memory_count_limit"] == "9"
        assert config["directory"] == "/var/cache/images"

    def test_env_strings_coerced_by_schema(self, monkeypatch):
        monkeypatch.setenv("TIERCACHE_MEMORY_COST_LIMIT_MB", "12.5")
        monkeypatch.setenv("TIERCACHE_IMAGE_QUALITY", "70")
        config = CacheConfig(**load_config_hierarchy())
        assert config.memory_cost_limit_mb == 12.5
        assert config.image_quality == 70

    def test_env_values_kept_raw(self, monkeypatch):
        monkeypatch.setenv("TIERCACHE_MEMORY_COUNT_LIMIT", "lots")
        assert load_config_hierarchy()["memory_count_limit"] == "lots"

    def test_runtime_overrides_win(self, monkeypatch):
        monkeypatch.setenv("TIERCACHE_MEMORY_COUNT_LIMIT", "9")
        config = load_config_hierarchy(memory_count_limit=3)
        assert config["memory_count_limit"] == 3

    def test_none_overrides_ignored(self):
        config = load_config_hierarchy(memory_count_limit=None, directory=None)
        assert config["memory_count_limit"] == DEFAULT_MEMORY_COUNT_LIMIT
        assert isinstance(config["directory"], Path)

    def test_invalid_yaml_ignored(self, tmp_path):
        (tmp_path / "tiercache.yaml").write_text("memory_count_limit: [unclosed\n")
        assert load_config_hierarchy() == get_defaults()

    def test_non_mapping_yaml_ignored(self, tmp_path):
        (tmp_path / "tiercache.yaml").write_text("- a\n- b\n")
        assert load_config_hierarchy() == get_defaults()

    def test_global_path_is_user_scoped(self):
        # The autouse fixture redirects it; the module constant is still a Path
        assert isinstance(hierarchy._GLOBAL_CONFIG_PATH, Path)
