"""AI-layer exceptions.

Both indicate programming errors upstream, not battle conditions.
"""


class AIError(Exception):
    """Base exception for the AI layer."""


class AIConfigurationError(AIError):
    """Raised when a tier is invoked without the inputs it requires."""


class NoCandidateError(AIError):
    """Raised when a selector receives no command with a positive weight."""
