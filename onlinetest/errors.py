"""Exceptions raised by the online test core."""


class OnlineTestError(Exception):
    """Base class for online test errors."""


class FetchFailure(OnlineTestError):
    """The question list for a subtopic could not be retrieved."""

    def __init__(self, sub_topic_name: str, reason: str) -> None:
        super().__init__(f"Failed to fetch questions for {sub_topic_name!r}: {reason}")
        self.sub_topic_name = sub_topic_name
        self.reason = reason


class PersistenceFailure(OnlineTestError):
    """Saving a finished test result to the student profile failed."""


class InvalidTransitionError(OnlineTestError):
    """A session was asked to move between states the state machine forbids."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Cannot move session from {current} to {target}")
        self.current = current
        self.target = target
