class DiagtraceError(Exception):
    """Base class for errors raised while configuring diagnostic instrumentation"""

    pass


class InvalidArgumentError(DiagtraceError, ValueError):
    """Raised when a configuration entry point is called with a missing argument"""

    def __init__(self, argument: str):
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class OptionsFrozenError(DiagtraceError, RuntimeError):
    """Raised when module options are modified after they were consumed at startup"""

    pass
