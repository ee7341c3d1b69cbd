"""
Unit tests for the experiment runner and its records.
"""

import pytest

from pathlab.experiment import ExperimentRunner, GeneratorSettings, SearchRun, TrialResult
from pathlab.graph import Graph, InfeasibleConstraintsError, bfs_shortest_path, dfs_path


@pytest.fixture
def runner() -> ExperimentRunner:
    """Seeded runner on small undirected graphs."""
    settings = GeneratorSettings(min_vertices=6, max_vertices=6, min_edges=5, max_edges=8)
    return ExperimentRunner(settings, seed=3)


class TestSearchRun:
    """Test SearchRun properties."""

    def test_found_path(self):
        """A non-empty path counts as found with len - 1 hops."""
        run = SearchRun(algorithm="bfs", source=0, target=3, path=[0, 2, 3], elapsed_ms=0.1)
        assert run.found is True
        assert run.hops == 2

    def test_missing_path(self):
        """An empty path is not found and has no hop count."""
        run = SearchRun(algorithm="dfs", source=0, target=3, path=[], elapsed_ms=0.1)
        assert run.found is False
        assert run.hops is None

    def test_all_found(self):
        """TrialResult.all_found requires every run to succeed."""
        trial = TrialResult(index=0, graph=Graph(2), source=0, target=1)
        trial.runs["bfs"] = SearchRun("bfs", 0, 1, [0, 1], 0.0)
        assert trial.all_found
        trial.runs["dfs"] = SearchRun("dfs", 0, 1, [], 0.0)
        assert not trial.all_found


class TestExperimentRunner:
    """Test trial generation and timing."""

    def test_defaults(self):
        """Default settings come from config and both searches run."""
        runner = ExperimentRunner()
        assert runner.algorithms == ["bfs", "dfs"]
        assert runner.settings.min_vertices == 10
        assert runner.settings.directed is False

    def test_unknown_algorithm(self):
        """Unknown algorithm names fail at construction."""
        with pytest.raises(ValueError):
            ExperimentRunner(algorithms=["bfs", "astar"])

    def test_trial_matches_direct_search(self, runner):
        """Recorded paths equal what the searches return on the same graph."""
        trial = runner.run_trial(4)
        assert trial.index == 4
        assert set(trial.runs) == {"bfs", "dfs"}
        g = trial.graph
        assert 0 <= trial.source < g.vertex_count
        assert 0 <= trial.target < g.vertex_count
        assert trial.runs["bfs"].path == bfs_shortest_path(g, trial.source, trial.target)
        assert trial.runs["dfs"].path == dfs_path(g, trial.source, trial.target)
        for run in trial.runs.values():
            assert run.elapsed_ms >= 0
            assert (run.source, run.target) == (trial.source, trial.target)

    def test_run_yields_requested_count(self, runner):
        """run(n) yields n trials numbered 0..n-1."""
        trials = list(runner.run(5))
        assert [t.index for t in trials] == [0, 1, 2, 3, 4]
        for t in trials:
            assert t.graph.vertex_count == 6
            assert 5 <= t.graph.edge_count <= 8

    def test_seed_reproducible(self):
        """Equal seeds give equal graphs and endpoints."""
        settings = GeneratorSettings(min_vertices=7, max_vertices=9, min_edges=4, max_edges=9)
        a = list(ExperimentRunner(settings, seed=21).run(3))
        b = list(ExperimentRunner(settings, seed=21).run(3))
        for x, y in zip(a, b):
            assert x.graph.get_edges() == y.graph.get_edges()
            assert (x.source, x.target) == (y.source, y.target)
            assert x.runs["bfs"].path == y.runs["bfs"].path

    def test_single_algorithm(self):
        """Only requested algorithms are run."""
        runner = ExperimentRunner(algorithms=["dfs"], seed=1)
        trial = runner.run_trial()
        assert list(trial.runs) == ["dfs"]

    def test_empty_graph_cannot_be_searched(self):
        """A zero-vertex graph has no endpoints to pick."""
        settings = GeneratorSettings(min_vertices=0, max_vertices=0, min_edges=0, max_edges=0)
        with pytest.raises(InfeasibleConstraintsError):
            ExperimentRunner(settings, seed=0).run_trial()

    def test_infeasible_settings_propagate(self):
        """Generator failures surface from run_trial."""
        settings = GeneratorSettings(min_vertices=3, max_vertices=3, min_edges=9, max_edges=9)
        with pytest.raises(InfeasibleConstraintsError):
            ExperimentRunner(settings).run_trial()

    def test_directed_settings(self):
        """Directed settings produce directed graphs within the caps."""
        settings = GeneratorSettings(directed=True, max_incoming_edges=3, max_outgoing_edges=3)
        trial = ExperimentRunner(settings, seed=8).run_trial()
        g = trial.graph
        assert g.directed
        assert all(g.in_degree(v) <= 3 and g.out_degree(v) <= 3 for v in range(g.vertex_count))

    def test_directed_defaults_complete(self):
        """The default directed setup (in/out caps of 1) runs every trial."""
        for seed in range(20):
            trials = list(ExperimentRunner(GeneratorSettings(directed=True), seed=seed).run(10))
            assert len(trials) == 10
            assert all(t.graph.edge_count == 10 for t in trials)
