from .core import run_case, run_batch, DEFAULT_MAX_TURNS
from .io import write_csv, write_manifest
from .stats import summarize, pretty_stats

__all__ = ["run_case", "run_batch", "DEFAULT_MAX_TURNS", "write_csv", "write_manifest",
           "summarize", "pretty_stats"]
