class ValidationError(ValueError):
    """Raised when the standings engine receives input of the wrong shape.

    Missing games, scores, overrides or schedules are normal data and never raise;
    only structurally malformed collections do.
    """


class MissingScheduleWarning(UserWarning):
    """Issued when a tournament has no schedule and the default round count is used."""
