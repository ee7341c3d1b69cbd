"""
Report module.

Text renderers for graphs and trials:
- format_adj_matrix / format_inc_matrix / format_adj_list
- format_path / format_trial
"""

from pathlab.report.formatting import (
    NO_PATH,
    format_adj_list,
    format_adj_matrix,
    format_inc_matrix,
    format_path,
    format_trial,
)

__all__ = [
    "NO_PATH",
    "format_adj_list",
    "format_adj_matrix",
    "format_inc_matrix",
    "format_path",
    "format_trial",
]
