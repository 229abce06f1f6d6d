"""Tests for color services."""

import io

import pytest

from runreport.domain.model import ColorRole
from runreport.infrastructure.colors import (
    DEFAULT_STYLES,
    PlainColorizer,
    RichColorizer,
    colorizer_for,
)


class TestPlainColorizer:
    """Tests for PlainColorizer."""

    @pytest.mark.parametrize("role", list(ColorRole))
    def test_returns_text_unchanged(self, role: ColorRole) -> None:
        """No markup for any role."""
        assert PlainColorizer().colorize(role, "*** Failed!") == "*** Failed!"


class TestRichColorizer:
    """Tests for RichColorizer."""

    def test_all_roles_have_default_style(self) -> None:
        """Every role is styled by default."""
        assert set(DEFAULT_STYLES) == set(ColorRole)

    @pytest.mark.parametrize("role", list(ColorRole))
    def test_wraps_text_in_ansi(self, role: ColorRole) -> None:
        """Styled output contains the text and escape sequences."""
        rendered = RichColorizer().colorize(role, "+++ OK")
        assert "+++ OK" in rendered
        assert "\x1b[" in rendered
        assert rendered != "+++ OK"

    def test_deterministic(self) -> None:
        """Same input, same output."""
        colors = RichColorizer()
        first = colors.colorize(ColorRole.WARNING, "@@@ Error!")
        assert colors.colorize(ColorRole.WARNING, "@@@ Error!") == first

    def test_unknown_role_unstyled(self) -> None:
        """Roles missing from a custom style map stay plain."""
        colors = RichColorizer({ColorRole.TEST_OK: "green"})
        assert colors.colorize(ColorRole.PENDING, "^^^ Pending!") == "^^^ Pending!"


class TestColorizerFor:
    """Tests for colorizer_for()."""

    def test_non_terminal_is_plain(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A BytesIO is not a terminal: no colors."""
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
        assert isinstance(colorizer_for(io.BytesIO()), PlainColorizer)
