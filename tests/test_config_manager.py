import json

import pytest

from config_manager import ConfigManager, ConfigValidationError


def _write(tmp_path, payload, name="config.json"):
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
    return str(path)


class TestLoading:
    def test_defaults_without_file(self):
        config = ConfigManager()
        assert config.get("pack", "method") == "bayer"
        assert config.get("pack", "compression_level") == 19
        assert config.get("unpack", "max_output_size") == 0
        assert config.validate() is config

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "absent.json"))
        assert config.get("pack", "bayer_power") == 3

    def test_partial_file_is_merged(self, tmp_path):
        path = _write(tmp_path, {"pack": {"method": "blue_noise", "workers": 4}})
        config = ConfigManager(path)
        assert config.get("pack", "method") == "blue_noise"
        assert config.get("pack", "workers") == 4
        assert config.get("pack", "compression_level") == 19
        assert config.get("unpack", "extension") == ".png"

    def test_defaults_not_shared(self, tmp_path):
        ConfigManager(_write(tmp_path, {"pack": {"workers": 8}}))
        assert ConfigManager.DEFAULT_CONFIG["pack"]["workers"] == 1

    def test_invalid_json(self, tmp_path):
        with pytest.raises(ConfigValidationError, match="Invalid JSON"):
            ConfigManager(_write(tmp_path, "{not json"))

    def test_non_object_root(self, tmp_path):
        with pytest.raises(ConfigValidationError):
            ConfigManager(_write(tmp_path, [1, 2, 3]))

    @pytest.mark.parametrize("payload", [{"pack": "oops"}, {"unpack": [1, 2]}, {"pack": None}])
    def test_section_must_be_object(self, tmp_path, payload):
        with pytest.raises(ConfigValidationError, match="must be a JSON object"):
            ConfigManager(_write(tmp_path, payload))


class TestAccessors:
    def test_get_missing_returns_default(self):
        config = ConfigManager()
        assert config.get("pack", "nope", default="x") == "x"
        assert config.get("nope", "deeper") is None

    def test_set_nested(self):
        config = ConfigManager()
        config.set("pack", "workers", value=3)
        config.set("extra", "key", value=True)
        assert config.get("pack", "workers") == 3
        assert config.get("extra", "key") is True

    def test_set_through_value_rejected(self):
        config = ConfigManager()
        config.set("pack", value="flat")
        with pytest.raises(ConfigValidationError, match="not a section"):
            config.set("pack", "method", value="bayer")

    def test_save_and_reload(self, tmp_path):
        path = str(tmp_path / "saved.json")
        config = ConfigManager()
        config.set("pack", "method", value="white_noise")
        config.save(path)
        assert ConfigManager(path).get("pack", "method") == "white_noise"

    def test_save_without_path(self):
        with pytest.raises(ConfigValidationError):
            ConfigManager().save()


class TestValidation:
    @pytest.mark.parametrize("keys,value", [
        (("pack", "method"), "floyd"),
        (("pack", "bayer_power"), 0),
        (("pack", "bayer_power"), 9),
        (("pack", "bayer_power"), "3"),
        (("pack", "compression_level"), 23),
        (("pack", "workers"), 0),
        (("pack", "workers"), True),
        (("unpack", "max_output_size"), -1),
        (("pack", "extension"), "ditherpack"),
        (("unpack", "extension"), None),
    ])
    def test_rejects(self, keys, value):
        config = ConfigManager()
        config.set(*keys, value=value)
        with pytest.raises(ConfigValidationError, match=keys[-1]):
            config.validate()

    def test_reports_every_problem(self):
        config = ConfigManager()
        config.set("pack", "bayer_power", value=99)
        config.set("pack", "workers", value=-2)
        with pytest.raises(ConfigValidationError) as exc_info:
            config.validate()
        message = str(exc_info.value)
        assert "bayer_power" in message
        assert "workers" in message
