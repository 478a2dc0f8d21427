from .feedback import Result, parse_feedback, results_from_pattern, pattern_from_results
from .position_index import PositionIndex
from .solver import Phase, Solver, new_solver, unique_characters
from .scoring import score, score_results
from .constraints import filter_candidates, is_consistent
from .validation import validate_guess, validate_feedback

__all__ = [
    "Result", "parse_feedback", "results_from_pattern", "pattern_from_results",
    "PositionIndex", "Phase", "Solver", "new_solver", "unique_characters",
    "score", "score_results", "filter_candidates", "is_consistent",
    "validate_guess", "validate_feedback",
]
