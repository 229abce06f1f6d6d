"""Color service implementations.

RichColorizer renders ANSI sequences with rich styles.
PlainColorizer leaves text untouched (no terminal, files, machine output).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from runreport.domain.model.enums import ColorRole

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import BinaryIO

    from runreport.domain.ports.colorizer import ColorizerProtocol


DEFAULT_STYLES: Mapping[ColorRole, str] = MappingProxyType(
    {
        ColorRole.TEST_START: "bold",
        ColorRole.TEST_OK: "green",
        ColorRole.WARNING: "bold red",
        ColorRole.PENDING: "cyan",
    },
)


class RichColorizer:
    """Applies rich styles per role. Stateless, safe to share between threads."""

    def __init__(
        self,
        styles: Mapping[ColorRole, str] | None = None,
        *,
        color_system: ColorSystem = ColorSystem.STANDARD,
    ) -> None:
        """Initialize colorizer.

        Args:
            styles: Role → rich style definition. None = DEFAULT_STYLES.
            color_system: Target terminal color system.
        """
        definitions = styles if styles is not None else DEFAULT_STYLES
        self._styles = {role: Style.parse(definition) for role, definition in definitions.items()}
        self._color_system = color_system

    def colorize(self, role: ColorRole, text: str) -> str:
        """Wrap text in the ANSI sequences of role's style."""
        style = self._styles.get(role)
        if style is None:
            return text
        return style.render(text, color_system=self._color_system)


class PlainColorizer:
    """Returns text unchanged."""

    def colorize(self, role: ColorRole, text: str) -> str:  # noqa: ARG002
        """Return text without markup."""
        return text


def colorizer_for(stream: BinaryIO) -> ColorizerProtocol:
    """Pick a colorizer for stream using rich's terminal detection.

    Honors NO_COLOR, FORCE_COLOR and TERM=dumb the way rich does.

    Args:
        stream: Destination stream.

    Returns:
        RichColorizer for color-capable terminals, PlainColorizer otherwise.
    """
    console = Console(file=stream)  # type: ignore[arg-type]
    if console.is_terminal and console.color_system is not None and not console.no_color:
        return RichColorizer()
    return PlainColorizer()
