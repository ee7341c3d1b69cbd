"""
Experiment module.

Provides timed search comparisons on random graphs:
- GeneratorSettings: Generator parameters per trial
- ExperimentRunner: Runs trials
- TrialResult: One graph and its searches
- SearchRun: One timed search
"""

from pathlab.experiment.runner import ExperimentRunner, GeneratorSettings
from pathlab.experiment.state import SearchRun, TrialResult

__all__ = [
    "ExperimentRunner",
    "GeneratorSettings",
    "SearchRun",
    "TrialResult",
]
