"""
Planner Errors

Failures the plan endpoints turn into error responses. Empty plans are not
errors and never raise.
"""


class PlannerError(Exception):
    """Base class for meal planner failures."""


class CatalogUnavailableError(PlannerError):
    """The menu catalog could not be read."""


class HistoryUnavailableError(PlannerError):
    """The student's meal history could not be read."""


class PlanNotSavedError(PlannerError):
    """A plan was generated but writing it to the meal log failed and was rolled back."""

    def __init__(self, student_id, message='Plan generated but not saved'):
        super().__init__(message)
        self.student_id = student_id


class WalletUnavailableError(PlannerError):
    """The wallet balance could not be read."""
