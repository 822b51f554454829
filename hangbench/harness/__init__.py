from .core import SweepResult, run_trial, run_sweep
from .io import sorted_scores, write_report, summarize, write_manifest

__all__ = ["SweepResult", "run_trial", "run_sweep", "sorted_scores", "write_report", "summarize",
           "write_manifest"]
