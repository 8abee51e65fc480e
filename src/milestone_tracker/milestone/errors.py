"""
Milestone Errors

Every failure raised by the tracker and its collaborators derives from
MilestoneError, and also from the closest builtin exception.
"""


class MilestoneError(Exception):
    """Base class for all milestone tracker errors"""


class ValidationError(MilestoneError, ValueError):
    """Goal or step text is empty or longer than the allowed maximum"""


class DuplicateError(MilestoneError, ValueError):
    """Text collides with the goal or an existing step description"""


class PreconditionError(MilestoneError, RuntimeError):
    """Operation requires a goal that has not been set"""


class NotFoundError(MilestoneError, LookupError):
    """No step matches the given description"""


class AlreadyCompleteError(MilestoneError, RuntimeError):
    """Step is already marked complete"""


class AlreadyClosedError(MilestoneError, RuntimeError):
    """Milestone is no longer active"""


class ParseError(MilestoneError, ValueError):
    """Generator response could not be decoded into a list of steps"""


class GenerationError(MilestoneError, RuntimeError):
    """Step generator failed to produce a response"""
