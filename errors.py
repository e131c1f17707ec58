
class ProbeError(Exception):
    """Base class for target-scoped probe failures."""
    result_code = 2

    def __init__(self, message: str, result_code=None):
        super().__init__(message)
        if result_code is not None:
            self.result_code = result_code


class ResolutionError(ProbeError):
    result_code = 1


class ExecutionError(ProbeError):
    """The binary could not run, timed out, or exited with a fatal status."""
    result_code = 2


class ParseError(ProbeError):
    result_code = 2
