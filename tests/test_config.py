"""Tests for stream configuration loading."""

from pathlib import Path

import pytest

from pinneaple_fixtures import DEFAULT_SEED, CyclicStream, RandomStream, StreamConfig, load_stream_config
from pinneaple_fixtures.config import dump_stream_config, load_yaml, stream_config_from_dict


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "fixtures.yaml"
    p.write_text(text, encoding="utf-8")
    return p


class TestLoadYaml:
    """Tests for YAML loading."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_yaml(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        assert load_yaml(_write(tmp_path, "")) == {}

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        with pytest.raises(TypeError, match="mapping"):
            load_yaml(_write(tmp_path, "- 1\n- 2\n"))


class TestStreamConfig:
    """Tests for building StreamConfig objects."""

    def test_defaults(self) -> None:
        cfg = stream_config_from_dict({})
        assert cfg == StreamConfig()
        assert cfg.seed == DEFAULT_SEED

    def test_cyclic_file(self, tmp_path: Path) -> None:
        cfg = load_stream_config(_write(tmp_path, "kind: cyclic\nvalues: [1, 2.5, 3]\n"))
        assert cfg.values == [1.0, 2.5, 3.0]
        s = cfg.build()
        assert isinstance(s, CyclicStream)
        assert [s.pull() for _ in range(4)] == [1.0, 2.5, 3.0, 1.0]

    def test_nested_stream_section(self, tmp_path: Path) -> None:
        text = "name: sensors\nstream:\n  kind: random\n  seed: 12\n  low: -1\n  high: 1\n"
        s = load_stream_config(_write(tmp_path, text)).build()
        assert isinstance(s, RandomStream)
        assert (s.low, s.high, s.seed) == (-1.0, 1.0, 12)

    def test_unknown_keys_become_options(self) -> None:
        cfg = stream_config_from_dict({"kind": "random", "block_size": 16})
        assert cfg.options == {"block_size": 16}
        assert cfg.build().block_size == 16

    def test_dump_is_loadable(self, tmp_path: Path) -> None:
        cfg = StreamConfig(kind="cyclic", values=[4.0, 5.0])
        loaded = load_stream_config(_write(tmp_path, dump_stream_config(cfg)))
        assert loaded == cfg
