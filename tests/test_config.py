"""
Tests for configuration layering: defaults, YAML file, environment.
"""

import pytest

from wordgraph.config import WordGraphConfig, load_config

ENV_VARS = [
    'WORDGRAPH_DAMPING',
    'WORDGRAPH_MAX_ITERATIONS',
    'WORDGRAPH_TOLERANCE',
    'WORDGRAPH_SEED',
    'WORDGRAPH_LOG_LEVEL',
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """Test suite for load_config."""

    def test_defaults(self):
        config = load_config()
        assert config == WordGraphConfig()
        assert config.damping_factor == 0.85
        assert config.max_iterations == 100
        assert config.tolerance == 1e-6
        assert config.seed is None
        assert config.walk_output_path == "random_walk.txt"

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "wordgraph.yaml"
        path.write_text("damping_factor: 0.5\nseed: 3\ndot_executable: /opt/dot\n", encoding="utf-8")

        config = load_config(path)

        assert config.damping_factor == 0.5
        assert config.seed == 3
        assert config.dot_executable == "/opt/dot"
        assert config.max_iterations == 100

    def test_unknown_keys_are_ignored(self, tmp_path, caplog):
        path = tmp_path / "wordgraph.yaml"
        path.write_text("colour: blue\nmax_iterations: 10\n", encoding="utf-8")

        config = load_config(path)

        assert config.max_iterations == 10
        assert "Unknown config key ignored: colour" in caplog.text

    @pytest.mark.parametrize("content", ["[1, 2, 3]\n", "damping_factor: [unclosed\n", ""])
    def test_unusable_file_falls_back_to_defaults(self, tmp_path, content):
        path = tmp_path / "wordgraph.yaml"
        path.write_text(content, encoding="utf-8")
        assert load_config(path) == WordGraphConfig()

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.yaml") == WordGraphConfig()

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "wordgraph.yaml"
        path.write_text("damping_factor: 0.5\nseed: 3\n", encoding="utf-8")
        monkeypatch.setenv('WORDGRAPH_DAMPING', '0.7')
        monkeypatch.setenv('WORDGRAPH_SEED', '11')
        monkeypatch.setenv('WORDGRAPH_MAX_ITERATIONS', '20')
        monkeypatch.setenv('WORDGRAPH_LOG_LEVEL', 'DEBUG')

        config = load_config(path)

        assert config.damping_factor == 0.7
        assert config.seed == 11
        assert config.max_iterations == 20
        assert config.log_level == 'DEBUG'

    def test_invalid_environment_values_are_ignored(self, monkeypatch):
        monkeypatch.setenv('WORDGRAPH_DAMPING', 'high')
        monkeypatch.setenv('WORDGRAPH_SEED', 'lucky')

        config = load_config()

        assert config.damping_factor == 0.85
        assert config.seed is None

    def test_to_dict(self):
        data = WordGraphConfig(seed=5).to_dict()
        assert data['seed'] == 5
        assert set(data) >= {'damping_factor', 'max_iterations', 'tolerance'}
