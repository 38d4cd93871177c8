"""Unit tests for UniverseProjector and ProjectorConfig."""

import io
import logging

import pytest

from lifesim.core import Universe
from lifesim.experiments import ProjectorConfig, StopReason, UniverseProjector
from lifesim.patterns import BLINKER, BLOCK, place_pattern


@pytest.fixture
def seeded_universe():
    """3x3 universe that dies out after five generations."""
    universe = Universe(3, 3)
    for row, column in [(0, 0), (0, 1), (1, 1), (2, 2)]:
        universe.set_alive(row, column)
    return universe


class TestProjectorConfig:
    """Tests for ProjectorConfig."""

    def test_defaults(self):
        cfg = ProjectorConfig()
        assert cfg.max_generations == 1000
        assert cfg.stop_on_cycle is False
        assert cfg.separator == ""
        assert cfg.alive_symbol == "1"
        assert cfg.dead_symbol == "0"

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("LIFESIM_MAX_GENERATIONS", raising=False)
        monkeypatch.delenv("LIFESIM_STOP_ON_CYCLE", raising=False)
        monkeypatch.delenv("LIFESIM_SEPARATOR", raising=False)
        assert ProjectorConfig.from_env() == ProjectorConfig()

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("LIFESIM_MAX_GENERATIONS", "25")
        monkeypatch.setenv("LIFESIM_STOP_ON_CYCLE", "true")
        monkeypatch.setenv("LIFESIM_SEPARATOR", "---")

        cfg = ProjectorConfig.from_env()
        assert cfg.max_generations == 25
        assert cfg.stop_on_cycle is True
        assert cfg.separator == "---"

    def test_from_env_unbounded(self, monkeypatch):
        monkeypatch.setenv("LIFESIM_MAX_GENERATIONS", "none")
        assert ProjectorConfig.from_env().max_generations is None

    def test_from_env_bad_cap(self, monkeypatch):
        monkeypatch.setenv("LIFESIM_MAX_GENERATIONS", "lots")
        with pytest.raises(ValueError):
            ProjectorConfig.from_env()

    def test_negative_cap_rejected(self):
        with pytest.raises(ValueError, match="max_generations"):
            ProjectorConfig(max_generations=-5)

    def test_zero_cap_allowed(self):
        assert ProjectorConfig(max_generations=0).max_generations == 0

    def test_from_env_negative_cap(self, monkeypatch):
        monkeypatch.setenv("LIFESIM_MAX_GENERATIONS", "-1")
        with pytest.raises(ValueError):
            ProjectorConfig.from_env()

    @pytest.mark.parametrize("raw", ["1", "yes", "On", "TRUE", " true "])
    def test_from_env_truthy_cycle_flag(self, monkeypatch, raw):
        monkeypatch.setenv("LIFESIM_STOP_ON_CYCLE", raw)
        assert ProjectorConfig.from_env().stop_on_cycle is True

    @pytest.mark.parametrize("raw", ["0", "no", "off", "False", ""])
    def test_from_env_falsy_cycle_flag(self, monkeypatch, raw):
        monkeypatch.setenv("LIFESIM_STOP_ON_CYCLE", raw)
        assert ProjectorConfig.from_env().stop_on_cycle is False

    def test_from_env_unrecognised_cycle_flag(self, monkeypatch):
        monkeypatch.setenv("LIFESIM_STOP_ON_CYCLE", "maybe")
        with pytest.raises(ValueError, match="LIFESIM_STOP_ON_CYCLE"):
            ProjectorConfig.from_env()


class TestRender:
    """Tests for text rendering."""

    def test_render_lines(self, seeded_universe):
        projector = UniverseProjector(seeded_universe)
        assert projector.render_lines() == ["1 1 0", "0 1 0", "0 0 1"]

    def test_render_writes_to_stream(self, seeded_universe):
        out = io.StringIO()
        UniverseProjector(seeded_universe, stream=out).render()
        assert out.getvalue() == "1 1 0\n0 1 0\n0 0 1\n"

    def test_custom_symbols(self, seeded_universe):
        cfg = ProjectorConfig(alive_symbol="#", dead_symbol=".")
        projector = UniverseProjector(seeded_universe, config=cfg)
        assert projector.render_lines()[0] == "# # ."

    def test_render_defaults_to_stdout(self, seeded_universe, capsys):
        UniverseProjector(seeded_universe).render()
        assert capsys.readouterr().out.splitlines() == ["1 1 0", "0 1 0", "0 0 1"]


class TestTimeTravel:
    """Tests for the run-until-extinct loop."""

    def test_runs_until_extinct(self, seeded_universe):
        out = io.StringIO()
        result = UniverseProjector(seeded_universe, stream=out).time_travel()

        assert result.stop_reason == StopReason.EXTINCT
        assert result.generations == 5
        assert result.population == [4, 5, 5, 3, 2, 0]
        assert result.period is None
        assert seeded_universe.is_extinct()

    def test_output_format(self, seeded_universe):
        out = io.StringIO()
        UniverseProjector(seeded_universe, stream=out).time_travel()

        text = out.getvalue()
        assert text.startswith("1 1 0\n1 1 1\n0 0 0\n\n1 0 1\n1 0 1\n0 1 0\n\n")
        assert text.endswith("0 0 0\n0 0 0\n0 0 0\n\n")
        assert len(text.splitlines()) == 5 * 4

    def test_custom_separator(self, seeded_universe):
        out = io.StringIO()
        cfg = ProjectorConfig(separator="--")
        UniverseProjector(seeded_universe, config=cfg, stream=out).time_travel()
        assert out.getvalue().splitlines().count("--") == 5

    def test_extinct_seed_renders_nothing(self):
        out = io.StringIO()
        result = UniverseProjector(Universe(3, 3), stream=out).time_travel()

        assert result.stop_reason == StopReason.EXTINCT
        assert result.generations == 0
        assert result.population == [0]
        assert out.getvalue() == ""

    def test_generation_cap(self):
        universe = Universe(4, 4)
        place_pattern(universe, BLOCK)
        cfg = ProjectorConfig(max_generations=3)

        result = UniverseProjector(universe, config=cfg, stream=io.StringIO()).time_travel()

        assert result.stop_reason == StopReason.GENERATION_CAP
        assert result.generations == 3
        assert universe.generation == 3
        assert result.population == [4, 4, 4, 4]

    def test_still_life_cycle(self):
        universe = Universe(4, 4)
        place_pattern(universe, BLOCK)
        cfg = ProjectorConfig(stop_on_cycle=True)

        result = UniverseProjector(universe, config=cfg, stream=io.StringIO()).time_travel()

        assert result.stop_reason == StopReason.CYCLE
        assert result.period == 1
        assert result.generations == 1

    def test_oscillator_cycle(self):
        universe = Universe(5, 5)
        place_pattern(universe, BLINKER)
        cfg = ProjectorConfig(max_generations=None, stop_on_cycle=True)

        result = UniverseProjector(universe, config=cfg, stream=io.StringIO()).time_travel()

        assert result.stop_reason == StopReason.CYCLE
        assert result.period == 2
        assert result.generations == 2

    def test_logs_stop_reason(self, seeded_universe, caplog):
        with caplog.at_level(logging.INFO, logger="lifesim.experiments.projector"):
            UniverseProjector(seeded_universe, stream=io.StringIO()).time_travel()
        assert "extinct" in caplog.text
