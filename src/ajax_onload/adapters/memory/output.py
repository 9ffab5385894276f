"""In-memory output adapter for testing.

Contents:
    * :class:`OutputSpy` - Captures written script blocks for test assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _empty_block_list() -> list[str]:
    """Create an empty typed list for captured blocks."""
    return []


@dataclass
class OutputSpy:
    """Captures page-output writes for test assertions.

    Each test should create its own OutputSpy instance to avoid cross-test pollution.
    :meth:`write_output` matches the WriteOutput Protocol expected by AppServices.

    Attributes:
        written: Blocks in the order they were written.

    Example:
        >>> spy = OutputSpy()
        >>> spy.write_output("a")
        >>> spy.write_output("b")
        >>> spy.text
        'ab'
    """

    written: list[str] = field(default_factory=_empty_block_list)

    @property
    def text(self) -> str:
        """Everything written so far, concatenated."""
        return "".join(self.written)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.written.clear()

    def write_output(self, text: str) -> None:
        """Record *text* instead of printing it."""
        self.written.append(text)


__all__ = ["OutputSpy"]
