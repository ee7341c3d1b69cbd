"""
Tests for the run_experiment command-line script.
"""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "run_experiment.py"


@pytest.fixture(scope="module")
def cli():
    """Load the script as a module without running main()."""
    spec = importlib.util.spec_from_file_location("run_experiment", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRunExperiment:
    """Test the CLI entry point."""

    def test_defaults(self, cli):
        """Defaults mirror the config module."""
        args = cli.parse_args([])
        assert args.graphs == 10
        assert args.algorithms == ["bfs", "dfs"]
        assert args.directed is False

    def test_prints_reports(self, cli, capsys):
        """Each trial prints matrices, lists and search results."""
        assert cli.main(["--graphs", "2", "--seed", "5"]) == 0
        out = capsys.readouterr().out
        assert out.count("Adjacency matrix:") == 2
        assert out.count("Incidence matrix:") == 2
        assert out.count("Adjacency list:") == 2
        assert "Graph 1 with 10 vertices and 10 edges" in out
        assert "Graph 2 with 10 vertices and 10 edges" in out
        assert "BFS time:" in out
        assert "DFS time:" in out

    def test_no_matrices(self, cli, capsys):
        """--no-matrices only prints the summaries."""
        assert cli.main(["--graphs", "1", "--seed", "5", "--no-matrices", "--algorithms", "bfs"]) == 0
        out = capsys.readouterr().out
        assert "Adjacency matrix:" not in out
        assert "BFS path from vertex" in out
        assert "DFS" not in out

    def test_infeasible_exit_code(self, cli, capsys):
        """Impossible constraints exit with status 1 and an error message."""
        code = cli.main(["--graphs", "1", "--min-edges", "50", "--max-edges", "50"])
        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_unknown_algorithm_rejected(self, cli):
        """argparse rejects algorithms outside the registry."""
        with pytest.raises(SystemExit):
            cli.parse_args(["--algorithms", "astar"])
