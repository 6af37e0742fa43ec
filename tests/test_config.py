"""Tests for configuration management and schema validation."""
import json
import pytest
import yaml
from config import Config, ConfigManager, ConfigPresets
from validation import Schema, PlaygroundSchema
from utils.exceptions import ConfigurationError, ValidationError


class TestConfig:
    """Tests for the Config container."""

    def test_dot_access(self):
        config = Config({'playground': {'style': 'win'}})
        assert config.playground.style == 'win'
        assert config.get('playground.style') == 'win'
        assert config.get('playground.missing', 'x') == 'x'

    def test_set_nested(self):
        """Test dotted set creates intermediate dicts."""
        config = Config()
        config.set('logging.log_level', 'DEBUG')
        assert config.to_dict() == {'logging': {'log_level': 'DEBUG'}}

    def test_deep_update(self):
        config = Config(ConfigPresets.default())
        config.update({'playground': {'style': 'win'}})
        assert config.get('playground.style') == 'win'
        assert config.get('playground.country') == 'united_states'

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            Config().nothing


class TestConfigManager:
    """Tests for ConfigManager sources."""

    def test_load_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / "playground.yaml"
        path.write_text(yaml.safe_dump({'playground': {'country': 'greece'}}))

        manager = ConfigManager()
        manager.load_from_file(str(path))
        assert manager.get('playground.country') == 'greece'

    def test_load_json(self, tmp_path):
        path = tmp_path / "playground.json"
        path.write_text(json.dumps({'playground': {'bank': 'icbc'}}))

        manager = ConfigManager()
        manager.load_from_file(str(path))
        assert manager.get('playground.bank') == 'icbc'

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigManager().load_from_file(str(tmp_path / "nope.yaml"))

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "playground.toml"
        path.write_text("x = 1")
        with pytest.raises(ConfigurationError):
            ConfigManager().load_from_file(str(path))

    def test_non_mapping_file(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "playground.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            ConfigManager().load_from_file(str(path))

    def test_load_from_env(self):
        """Test prefixed variables map to nested keys."""
        manager = ConfigManager()
        manager.load_from_env(environ={
            'FACTORY_PLAYGROUND__STYLE': 'win',
            'FACTORY_PLAYGROUND__NUMBERS': '["3", "4"]',
            'FACTORY_LOGGING__ENABLE_FILE': 'false',
            'OTHER_VALUE': 'ignored',
        })
        assert manager.get('playground.style') == 'win'
        assert manager.get('playground.numbers') == ['3', '4']
        assert manager.get('logging.enable_file') is False
        assert manager.get('other_value') is None

    def test_save_and_reload(self, tmp_path):
        manager = ConfigManager()
        manager.load_from_dict(ConfigPresets.default())
        path = tmp_path / "saved" / "config.yaml"
        manager.save_to_file(str(path))

        reloaded = ConfigManager()
        reloaded.load_from_file(str(path))
        assert reloaded.get_config().to_dict() == ConfigPresets.default()

    def test_validate_fills_defaults(self):
        """Test schema defaults are applied on validate."""
        manager = ConfigManager(schema=PlaygroundSchema())
        manager.load_from_dict({'playground': {'style': 'win'}})
        config = manager.validate()
        assert config.get('playground.style') == 'win'
        assert config.get('playground.country') == 'united_states'
        assert config.get('logging.log_level') == 'WARNING'

    def test_validate_rejects_bad_choice(self):
        manager = ConfigManager(schema=PlaygroundSchema())
        manager.load_from_dict({'playground': {'style': 'linux'}})
        with pytest.raises(ConfigurationError):
            manager.validate()


class TestSchema:
    """Tests for Schema."""

    def test_required_field(self):
        schema = Schema({'name': str})
        with pytest.raises(ValidationError) as exc_info:
            schema.validate({})
        assert 'Missing required field: name' in exc_info.value.details['errors']

    def test_strict_rejects_extra(self):
        schema = Schema({'name': str}, strict=True)
        with pytest.raises(ValidationError):
            schema.validate({'name': 'a', 'extra': 1})

    def test_item_type(self):
        """Test list items must be strings for numbers."""
        with pytest.raises(ValidationError):
            PlaygroundSchema().validate({'playground': {'numbers': [1, 2]}})

    def test_max_items(self):
        """Test lists longer than max_items are rejected."""
        schema = Schema({'numbers': {'type': list, 'max_items': 2}})
        assert schema.validate({'numbers': ['1', '2']}) == {'numbers': ['1', '2']}
        with pytest.raises(ValidationError) as exc_info:
            schema.validate({'numbers': ['1', '2', '3']})
        assert exc_info.value.details['errors'] == ["Field 'numbers': At most 2 items allowed, got 3"]

    def test_numbers_limited_to_number_types(self):
        """Test more numbers than number types fail playground validation."""
        with pytest.raises(ValidationError):
            PlaygroundSchema().validate({'playground': {'numbers': ['1', '2', '3']}})

    def test_choices_accept_dashes(self):
        """Test dashed names validate like the runner parses them."""
        validated = PlaygroundSchema().validate({'playground': {'country': 'united-states'}})
        assert validated['playground']['country'] == 'united-states'

    def test_choices_case_insensitive(self):
        validated = PlaygroundSchema().validate({'playground': {'country': 'GREECE'}})
        assert validated['playground']['country'] == 'GREECE'
