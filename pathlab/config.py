"""
Configuration constants for Graph Path Lab.

All tunable parameters are defined here. A few settings can be overridden
from the environment (or a local .env file) - see the Environment section.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# =============================================================================
# Graph Configuration
# =============================================================================

# Edge weights are positive integers; 0 in the adjacency matrix means "no edge"
WEIGHT_MIN = 1
WEIGHT_MAX = 100

# =============================================================================
# Generator Configuration
# =============================================================================

# Default shape of generated graphs (matches the classic lab setup)
DEFAULT_MIN_VERTICES = 10
DEFAULT_MAX_VERTICES = 10
DEFAULT_MIN_EDGES = 10
DEFAULT_MAX_EDGES = 10
DEFAULT_MAX_EDGES_PER_VERTEX = 10
DEFAULT_DIRECTED = False

# In/out degree caps, only consulted for directed graphs
DEFAULT_MAX_INCOMING_EDGES = 1
DEFAULT_MAX_OUTGOING_EDGES = 1

# Rejection sampling budget: attempts allowed per requested edge.
# The generator gives up with InfeasibleConstraintsError once exhausted.
GENERATOR_MAX_ATTEMPTS_PER_EDGE = 1000

# Floor for the attempt budget so tiny targets still get a fair chance
GENERATOR_MIN_ATTEMPTS = 10_000

# =============================================================================
# Experiment Configuration
# =============================================================================

# Number of graphs generated per experiment run
DEFAULT_NUM_GRAPHS = 10

# Search algorithms run on every trial, in order
DEFAULT_ALGORITHMS = ("bfs", "dfs")

# =============================================================================
# Environment
# =============================================================================


def _env_seed(name: str = "PATHLAB_SEED") -> int | None:
    """Read an integer seed from the environment, ignoring malformed values."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer")
        return None


# Seed for reproducible experiments (unset = fresh randomness every run)
DEFAULT_SEED = _env_seed()

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("PATHLAB_LOG_LEVEL", "INFO")
