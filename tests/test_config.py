"""
Test: Configuration

Run:
    python -m pytest tests/test_config.py -v
"""

import pytest

import numvec
from numvec import config


class TestGet:

    def test_defaults(self):
        assert config.get('dtype.default') == 'float64'
        assert config.get('random.validate_parameters') is True
        assert config.get('reductions.float_extrema') is False

    def test_missing_path(self):
        assert config.get('dtype.nope') is None
        assert config.get('nope.nope', 42) == 42

    def test_defaults_valid(self):
        assert config.validate_config() == []


class TestSet:

    def test_set_option(self):
        config.set_option('dtype.default', 'int16')
        assert numvec.zeros(2).dtype.name == 'int16'

    def test_unknown_option(self):
        with pytest.raises(KeyError):
            config.set_option('dtype.nope', 1)
        with pytest.raises(KeyError):
            config.set_option('nope.default', 1)
        with pytest.raises(KeyError):
            config.set_option('dtype', 'int16')

    def test_option_context_restores(self):
        with config.option_context(random__validate_parameters=False):
            assert config.get('random.validate_parameters') is False
        assert config.get('random.validate_parameters') is True

    def test_option_context_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with config.option_context(dtype__default='int8'):
                raise RuntimeError('boom')
        assert config.get('dtype.default') == 'float64'

    def test_reset(self):
        config.set_option('reductions.float_extrema', True)
        config.reset()
        assert config.get('reductions.float_extrema') is False

    def test_validate_catches_bad_values(self):
        config.set_option('dtype.default', 'complex128')
        config.set_option('random.validate_parameters', 'yes')
        errors = config.validate_config()
        assert len(errors) == 2


class TestLoadConfig:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / 'numvec.yaml'
        path.write_text(
            "dtype:\n"
            "  default: int32\n"
            "reductions:\n"
            "  float_extrema: true\n"
        )
        config.load_config(path)
        assert config.get('dtype.default') == 'int32'
        assert numvec.Vector([2.0, 5.0]).max() == 5.0

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')
        config.load_config(path)
        assert config.get('dtype.default') == 'float64'

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            config.load_config(tmp_path / 'missing.yaml')

    def test_unknown_key_rolls_back(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text(
            "dtype:\n"
            "  default: int32\n"
            "random:\n"
            "  seed: 3\n"
        )
        with pytest.raises(KeyError):
            config.load_config(path)
        assert config.get('dtype.default') == 'float64'

    def test_invalid_value_rolls_back(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text("dtype:\n  default: bool\n")
        with pytest.raises(ValueError):
            config.load_config(path)
        assert config.get('dtype.default') == 'float64'
