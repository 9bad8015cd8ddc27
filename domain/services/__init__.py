"""
Pure domain services operating on exercise records.
"""

from domain.services.stats import compute_exercise_stats

__all__ = ["compute_exercise_stats"]
