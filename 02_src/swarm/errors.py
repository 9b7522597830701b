"""Error taxonomy for coordinator operations."""


class CoordinatorError(Exception):
    """Base class for errors raised by coordinator operations."""


class InvalidRequestError(CoordinatorError):
    """A required request field is missing or malformed."""


class NotFoundError(CoordinatorError):
    """An agent, job, task or bounty identifier is unknown."""


class UpstreamError(CoordinatorError):
    """The bounty source failed or returned an unusable body."""


class AgentUnavailableError(CoordinatorError):
    """An agent was asked to take a task while not idle."""
