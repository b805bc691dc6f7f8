"""Tests for hexdump line formatting."""

from __future__ import annotations

import io

import pytest
from rich.console import Console
from rich.text import Text

from hexprobe.core.formatter import decorate, format_line, line_width
from hexprobe.core.models import RenderConfig


def _config(**overrides) -> RenderConfig:
    options = {"color_enabled": False}
    options.update(overrides)
    return RenderConfig(**options)


class TestDecorate:
    """Tests for the decorate helper."""

    def test_enabled_applies_style(self) -> None:
        text = decorate("41", "green", True)
        assert text.plain == "41"
        assert str(text.style) == "green"

    def test_disabled_is_plain(self) -> None:
        text = decorate("41", "green", False)
        assert text.plain == "41"
        assert not text.style
        assert not text.spans


class TestFormatLine:
    """Tests for format_line without color."""

    def test_mixed_classes_example(self) -> None:
        """Four bytes of different classes on a 16-byte line."""
        line = format_line(0, bytes([0x00, 0x41, 0x0A, 0xFF]), _config())
        expected = "00000000  00 41 0a ff " + " " * 37 + " |.A.." + " " * 12 + "|"
        assert line.plain == expected

    def test_full_line(self) -> None:
        line = format_line(0x10, b"0123456789ABCDEF", _config())
        assert line.plain == (
            "00000010  30 31 32 33 34 35 36 37  38 39 41 42 43 44 45 46  |0123456789ABCDEF|"
        )

    def test_elf_header_line(self) -> None:
        data = b"\x7fELF\x02\x01\x01\x00" + b"\x00" * 8
        line = format_line(0, data, _config())
        assert line.plain.startswith("00000000  7f 45 4c 46 02 01 01 00  00 00")
        assert line.plain.endswith("|.ELF............|")

    def test_offset_is_lowercase_even_with_uppercase_hex(self) -> None:
        line = format_line(0xABCDEF, b"\xab", _config(uppercase_hex=True))
        assert line.plain.startswith("00abcdef  AB ")

    def test_lowercase_hex_by_default(self) -> None:
        line = format_line(0, b"\xab\xcd", _config())
        assert "ab cd" in line.plain

    def test_whitespace_rendered_as_dot(self) -> None:
        line = format_line(0, b"a\tb\nc\r", _config())
        assert "|a.b.c." in line.plain

    def test_no_offset(self) -> None:
        line = format_line(0x20, b"AB", _config(show_offset=False))
        assert line.plain.startswith("41 42 ")
        assert "00000020" not in line.plain

    def test_no_ascii(self) -> None:
        line = format_line(0, b"AB", _config(show_ascii=False))
        assert "|" not in line.plain
        assert line.plain.startswith("00000000  41 42")

    def test_separator_after_eighth_byte(self) -> None:
        line = format_line(0, bytes(9), _config(show_offset=False, show_ascii=False))
        assert line.plain.startswith("00 00 00 00 00 00 00 00  00 ")

    def test_exactly_eight_bytes_keeps_separator_once(self) -> None:
        config = _config(show_offset=False, show_ascii=False)
        line = format_line(0, bytes(8), config)
        assert line.plain.startswith("00 " * 8 + " ")
        assert len(line.plain) == line_width(config)

    def test_empty_chunk_renders_padding(self) -> None:
        config = _config()
        line = format_line(0x40, b"", config)
        assert line.plain == "00000040  " + " " * 49 + " |" + " " * 16 + "|"

    def test_small_line_width_never_uses_separator(self) -> None:
        config = _config(bytes_per_line=4)
        full = format_line(0, b"ABCD", config)
        short = format_line(4, b"EF", config)
        assert full.plain == "00000000  41 42 43 44  |ABCD|"
        assert short.plain == "00000004  45 46        |EF  |"

    def test_single_byte_per_line(self) -> None:
        line = format_line(7, b"\x00", _config(bytes_per_line=1))
        assert line.plain == "00000007  00  |.|"

    def test_chunk_longer_than_line_raises(self) -> None:
        with pytest.raises(ValueError):
            format_line(0, bytes(17), _config())

    def test_no_trailing_newline(self) -> None:
        assert not format_line(0, b"A", _config()).plain.endswith("\n")

    @pytest.mark.parametrize("columns", [1, 4, 7, 8, 9, 16, 32])
    @pytest.mark.parametrize("show_ascii", [True, False])
    @pytest.mark.parametrize("show_offset", [True, False])
    def test_width_is_constant_for_every_chunk_length(
        self, columns: int, show_ascii: bool, show_offset: bool
    ) -> None:
        config = _config(bytes_per_line=columns, show_ascii=show_ascii, show_offset=show_offset)
        widths = {len(format_line(0, bytes(n), config).plain) for n in range(columns + 1)}
        assert widths == {line_width(config)}

    def test_hex_pairs_round_trip(self) -> None:
        """Stripping decoration and parsing the hex pairs recovers the bytes."""
        data = bytes([0x00, 0x7F, 0x80, 0xFF, 0x41, 0x0A, 0x20, 0x1B] * 2)
        config = _config(show_offset=False, show_ascii=False, uppercase_hex=True)
        line = format_line(0, data, config)
        assert bytes.fromhex(line.plain) == data


class TestFormatLineColor:
    """Tests for colored output."""

    def test_color_does_not_change_plain_text(self) -> None:
        data = bytes([0x00, 0x41, 0x0A, 0xFF, 0x01])
        plain = format_line(0, data, _config())
        colored = format_line(0, data, _config(color_enabled=True))
        assert colored.plain == plain.plain

    def test_plain_output_has_no_spans(self) -> None:
        line = format_line(0, b"\x00A", _config())
        assert line.spans == []

    def test_styles_by_class(self) -> None:
        line = format_line(0, bytes([0x00, 0x41, 0x0A, 0xFF, 0x01]), _config(color_enabled=True))
        styled = {(line.plain[s.start : s.end], str(s.style)) for s in line.spans}
        assert ("00000000", "cyan") in styled
        assert ("00", "bright_black") in styled
        assert ("41", "green") in styled
        assert ("0a", "cyan") in styled
        assert ("ff", "yellow") in styled
        assert ("01", "red") in styled
        assert ("A", "green") in styled

    def test_spaces_are_never_styled(self) -> None:
        line = format_line(0, b"Hello,World!", _config(color_enabled=True))
        for span in line.spans:
            assert " " not in line.plain[span.start : span.end]

    def test_ansi_rendering(self) -> None:
        line = format_line(0, b"\x00A", _config(color_enabled=True))
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=True, color_system="standard", width=200)
        console.print(line, soft_wrap=True)
        output = buffer.getvalue()
        assert "\x1b[36m00000000" in output
        assert "\x1b[32m41" in output
        assert "\x1b[90m00" in output

    def test_returns_rich_text(self) -> None:
        assert isinstance(format_line(0, b"A", _config(color_enabled=True)), Text)


class TestLineWidth:
    """Tests for line_width."""

    def test_default_width(self) -> None:
        assert line_width(_config()) == 78

    def test_without_columns(self) -> None:
        assert line_width(_config(show_ascii=False, show_offset=False)) == 49

    def test_small_line(self) -> None:
        assert line_width(_config(bytes_per_line=4)) == 10 + 12 + 7
