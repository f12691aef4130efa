"""Tests for logfake.config: the dotted-key configuration repository."""

import json

from logfake.config import (
    DEFAULTS,
    Repository,
    load_config,
    load_json,
    merge,
)


class TestRepository:
    """Dotted get/set/has over nested dicts."""

    def test_defaults(self):
        """A bare Repository names 'stack' as the default channel."""
        assert Repository().get('logging.default') == 'stack'

    def test_defaults_are_not_shared(self):
        """Changing one repository does not change DEFAULTS."""
        Repository().set('logging.default', 'changed')
        assert DEFAULTS['logging']['default'] == 'stack'

    def test_get_missing_returns_default(self):
        config = Repository({})
        assert config.get('logging.default') is None
        assert config.get('logging.default', 'fallback') == 'fallback'

    def test_set_creates_parents(self):
        config = Repository({})
        config.set('logging.channels.app.level', 'debug')
        assert config.all() == {'logging': {'channels': {'app': {'level': 'debug'}}}}

    def test_set_replaces_non_dict_parent(self):
        config = Repository({'logging': 'flat'})
        config.set('logging.default', 'x')
        assert config.get('logging.default') == 'x'

    def test_has_distinguishes_none_from_missing(self):
        """A key explicitly set to None still exists."""
        config = Repository({})
        assert not config.has('logging.default')
        config.set('logging.default', None)
        assert config.has('logging.default')
        assert config.get('logging.default', 'fallback') is None

    def test_all_is_a_copy(self):
        config = Repository()
        config.all()['logging']['default'] = 'mutated'
        assert config.get('logging.default') == 'stack'


class TestLoadJson:
    """JSON loading with error handling."""

    def test_load_valid_json(self, tmp_path):
        f = tmp_path / "logging.json"
        f.write_text('{"logging": {"default": "app"}}')
        assert load_json(f) == {"logging": {"default": "app"}}

    def test_load_missing_file(self, tmp_path):
        """Should return {} for missing files."""
        assert load_json(tmp_path / "nope.json") == {}

    def test_load_malformed_json(self, tmp_path):
        """Should return {} for malformed JSON."""
        f = tmp_path / "bad.json"
        f.write_text("{not valid json")
        assert load_json(f) == {}

    def test_load_non_object_json(self, tmp_path):
        """A JSON list is not a config; treated as empty."""
        f = tmp_path / "list.json"
        f.write_text("[1, 2]")
        assert load_json(f) == {}


class TestLoadConfig:
    """load_config() layers a file over the defaults."""

    def test_no_path_gives_defaults(self):
        assert load_config().all() == DEFAULTS

    def test_file_overrides_default(self, tmp_path):
        f = tmp_path / "logging.json"
        f.write_text(json.dumps({"logging": {"default": "daily", "extra": 1}}))
        config = load_config(f)
        assert config.get('logging.default') == 'daily'
        assert config.get('logging.extra') == 1

    def test_file_can_null_the_default(self, tmp_path):
        f = tmp_path / "logging.json"
        f.write_text(json.dumps({"logging": {"default": None}}))
        assert load_config(f).get('logging.default') is None

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.json").get('logging.default') == 'stack'

    def test_merge_is_recursive(self):
        base = {'a': {'b': 1, 'c': 2}}
        assert merge(base, {'a': {'c': 3}}) == {'a': {'b': 1, 'c': 3}}
        assert base == {'a': {'b': 1, 'c': 2}}
