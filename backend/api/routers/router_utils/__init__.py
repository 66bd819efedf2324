"""Router helper utilities."""

from .study_error_handling import handle_study_errors

__all__ = ["handle_study_errors"]
