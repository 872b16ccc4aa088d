"""
Custom exception types for the robotsim command pipeline.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""


class CommandParseError(ValueError):
    """Command text recognised but its arguments are unusable."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(message)

    def __str__(self):
        return self.original_message
