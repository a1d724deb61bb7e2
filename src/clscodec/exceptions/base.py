"""Root of the clscodec exception tree.

Each error carries two renderings of the same failure. ``user_message`` is
short and suitable for a status line; ``technical_message`` names the
field, offset or value involved and is what gets logged.
"""

from typing import Optional


class ClsCodecError(Exception):
    """
    Base exception for everything raised by clscodec.

    Attributes:
        user_message: Short description shown to a person
        technical_message: Precise description written to logs
        recoverable: True when different input would succeed
        recovery_hint: What to change, if anything is known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message if technical_message else user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, when there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
