"""Typed failures raised by the validation stages of the pipeline.

All errors are fail-fast and non-retryable. Any of them aborts the pipeline before
the region predicate runs or session history is touched. Adapters translate them
once, at the transport edge, using `status_code`.
"""


class AreaCheckError(Exception):
    """Base class for request validation failures.

    Attributes:
        param: Name of the offending request parameter.
        reason: Human-readable explanation.
        status_code: HTTP status hint for transport adapters.
    """

    status_code = 400

    def __init__(self, param, reason):
        super().__init__(f"{param}: {reason}")
        self.param = param
        self.reason = reason

    @property
    def kind(self):
        return type(self).__name__

    def to_dict(self):
        return {"error": self.kind, "param": self.param, "message": self.reason}


class ParamNotFound(AreaCheckError):
    """A required parameter key is entirely absent."""

    def __init__(self, param):
        super().__init__(param, f"Required parameter '{param}' is missing")


class ParamValueNotProvided(AreaCheckError):
    """The parameter key is present but carries no value."""

    def __init__(self, param):
        super().__init__(param, f"Parameter '{param}' has no value")


class InvalidValue(AreaCheckError):
    """The value fails a length, parse, range or legal-set check."""

    status_code = 422

    def __init__(self, param, reason="Value is not a valid number"):
        super().__init__(param, reason)
