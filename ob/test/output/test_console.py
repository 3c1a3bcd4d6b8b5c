"""Tests for ob.output.console module."""

from __future__ import annotations

import pytest

from ob.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello", Style.DIM)
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DIM

    def test_error_prefix(self) -> None:
        console = MockConsole()
        console.error("boom")
        assert console.messages == ["error: boom"]
        assert console.has_error()

    def test_raw_keeps_text_verbatim(self) -> None:
        console = MockConsole()
        console.raw("line 1\n[red]not markup[/red]\n")
        assert console.raw_text == "line 1\n[red]not markup[/red]\n"
        assert console.count(Style.RAW) == 1

    def test_raw_ignores_empty(self) -> None:
        console = MockConsole()
        console.raw("")
        assert console.outputs == []

    def test_find_and_clear(self) -> None:
        console = MockConsole()
        console.success("built")
        console.error("note")
        assert len(console.find("built")) == 1
        console.clear()
        assert console.text == ""


class TestRichConsole:
    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = RichConsole()
        assert console is not None

    def test_raw_writes_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.raw("main.go:3: [undefined] x\n")
        assert "main.go:3: [undefined] x" in capsys.readouterr().out
