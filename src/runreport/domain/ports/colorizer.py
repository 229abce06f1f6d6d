"""Color service port.

Given a semantic role and text, return the text with presentation markup
applied or stripped, depending on terminal capability. Opaque to reporters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from runreport.domain.model.enums import ColorRole


class ColorizerProtocol(Protocol):
    """Contract for color services."""

    def colorize(self, role: ColorRole, text: str) -> str:
        """Apply the presentation of role to text.

        Args:
            role: Semantic role of the fragment.
            text: Plain text.

        Returns:
            Text with markup applied (or unchanged).
        """
        ...
