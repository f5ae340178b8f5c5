"""
Error types raised while picking a winner and rendering the announcement card.

All of them are terminal for the current turn: they propagate to the
adapter's on_turn_error handler and no partial card is sent.
"""


class RandomlyError(Exception):
    """Base class for Randomly bot errors."""
    pass


class InvalidInputError(RandomlyError):
    """Selection was asked to pick from an empty sequence."""
    pass


class TemplateLoadError(RandomlyError):
    """Card template file is missing or unreadable."""
    pass


class TemplateParseError(RandomlyError):
    """Card template is malformed or did not render to valid JSON."""
    pass
