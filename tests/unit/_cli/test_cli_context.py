"""Test kcloud._cli.utils."""

from __future__ import annotations

import pytest

from kcloud._cli.utils import CliContext


class TestCliContext:
    """Test CliContext."""

    def test___str__(self) -> None:
        """Test __str__."""
        assert str(CliContext(debug=1, verbose=True)) == (
            "CliContext({'debug': 1, 'no_color': False, 'verbose': True})"
        )

    @pytest.mark.parametrize("value, expected", [(None, None), ("", None), ("fra0", "fra0")])
    def test_metro(
        self, expected: str | None, monkeypatch: pytest.MonkeyPatch, value: str | None
    ) -> None:
        """Test metro defaults to KRAFTCLOUD_METRO."""
        if value is not None:
            monkeypatch.setenv("KRAFTCLOUD_METRO", value)
        assert CliContext().metro == expected
