from proclog.consts.SinkOperation import SinkOperation


class LoopError(RuntimeError):
    """A sink operation failed and aborted the sampling run.

    The underlying exception is chained as __cause__.
    """

    def __init__(self, operation: SinkOperation, message: str):
        super().__init__(message)
        self.operation = operation
