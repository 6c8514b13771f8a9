"""Service-layer exceptions."""


class BattleStateError(Exception):
    """Raised when a battle session is driven in an invalid order."""
