class DayPlannerError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(DayPlannerError):
    status_code = 404


class InvalidInputError(DayPlannerError):
    status_code = 400


class StoreUnavailableError(DayPlannerError):
    status_code = 503
