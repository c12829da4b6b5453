from .chart import (
    plot_path_histograms,
    plot_path_share,
    plot_time_vs_empties,
)

__all__ = [
    "plot_path_histograms",
    "plot_path_share",
    "plot_time_vs_empties",
]
