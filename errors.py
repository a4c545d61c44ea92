class FlowError(Exception):
    """
    Base class for every error raised by the flow network core.
    """


class InvalidArgument(FlowError, ValueError):
    """
    Malformed construction input: self-loop, vertex out of range,
    negative capacity, degenerate vertex count, unknown endpoint.
    """


class InvalidState(FlowError, RuntimeError):
    """
    An operation would move an edge's flow outside [0, capacity],
    or the network is mutated after it has been solved.
    """


class InvariantViolation(FlowError, RuntimeError):
    """
    Internal logic defect detected while solving. Never recoverable.
    """
