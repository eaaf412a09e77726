"""Tests for diagnostics/formatter.py and the message templates.

Python 3.13+.
"""

import json

from hypothesis import event, given
from hypothesis import strategies as st

from klhyphen.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
)


class TestDiagnosticFormatterConstruction:
    """Test DiagnosticFormatter construction and defaults."""

    def test_default_construction(self):
        """Default DiagnosticFormatter uses rust format, no sanitize, no color."""
        formatter = DiagnosticFormatter()

        assert formatter.output_format == OutputFormat.RUST
        assert formatter.sanitize is False
        assert formatter.color is False
        assert formatter.max_content_length == 100


class TestRustFormat:
    """Rust compiler style output."""

    def test_minimal(self):
        """Only the header line when no optional fields are set."""
        diagnostic = Diagnostic(code=DiagnosticCode.IO_FAILED, message="boom")
        assert DiagnosticFormatter().format(diagnostic) == "error[IO_FAILED]: boom"

    def test_location_and_offset(self):
        """Location and byte offset share the arrow line."""
        diagnostic = ErrorTemplate.deserialization_failed(
            "Unexpected end of input", offset=42, location="en-us.standard.bincode"
        )
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines[0] == (
            "error[DESERIALIZATION_FAILED]: Dictionary could not be deserialized: "
            "Unexpected end of input"
        )
        assert lines[1] == "  --> en-us.standard.bincode, byte 42"

    def test_offset_only(self):
        """Byte offset is shown without a location."""
        diagnostic = ErrorTemplate.deserialization_failed("bad", offset=7)
        assert "  --> byte 7" in DiagnosticFormatter().format(diagnostic)

    def test_colored_label(self):
        """The error label is bold red when color is enabled."""
        diagnostic = Diagnostic(code=DiagnosticCode.IO_FAILED, message="m")
        assert DiagnosticFormatter(color=True).format(diagnostic).startswith("\033[1;31m")

    def test_format_error_matches_default_formatter(self):
        """Diagnostic.format_error is the default Rust rendering."""
        diagnostic = ErrorTemplate.resource_missing("pl", "standard", location="pkg/pl")
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)


class TestSimpleFormat:
    """Single-line output."""

    def test_simple(self):
        """SIMPLE renders CODE: message."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostic = ErrorTemplate.resource_missing("en-us", "standard")
        assert formatter.format(diagnostic) == (
            "RESOURCE_MISSING: The embedded dictionary could not be retrieved"
        )

    def test_format_all(self):
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            Diagnostic(code=DiagnosticCode.IO_FAILED, message="a"),
            Diagnostic(code=DiagnosticCode.IO_FAILED, message="b"),
        ]
        assert formatter.format_all(diagnostics) == "IO_FAILED: a\n\nIO_FAILED: b"


class TestJsonFormat:
    """JSON output for tooling."""

    def test_fields(self):
        """All populated fields appear in the JSON object."""
        diagnostic = ErrorTemplate.unknown_language_tag(0, 200, 78)
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(diagnostic))
        assert data["code"] == "UNKNOWN_LANGUAGE_TAG"
        assert data["code_value"] == 6103
        assert data["offset"] == 0
        assert "location" not in data
        assert set(data) == {"code", "code_value", "message", "offset", "found"}

    def test_location_included(self):
        """Location is emitted when present."""
        diagnostic = ErrorTemplate.io_failed("denied", location="/srv/fr.standard.bincode")
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(diagnostic))
        assert data["location"] == "/srv/fr.standard.bincode"
        assert data["hint"] == "Check that the dictionary file exists and is readable"


class TestSanitize:
    """Truncation of long content."""

    def test_long_message_truncated(self):
        """Messages longer than max_content_length are cut and marked."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = Diagnostic(code=DiagnosticCode.IO_FAILED, message="x" * 50)
        assert formatter.format(diagnostic) == "IO_FAILED: " + "x" * 10 + "..."

    @given(message=st.text(min_size=1, max_size=300))
    def test_sanitized_json_is_valid(self, message: str):
        """JSON output stays parseable for arbitrary messages."""
        event(f"truncated={len(message) > 100}")
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON, sanitize=True)
        data = json.loads(formatter.format(Diagnostic(DiagnosticCode.IO_FAILED, message)))
        assert len(data["message"]) <= 103


class TestDecodeTemplates:
    """Decode error templates carry offsets."""

    def test_unexpected_eof(self):
        """EOF diagnostic reports how much was missing."""
        diagnostic = ErrorTemplate.unexpected_eof(16, 8, 3)
        assert diagnostic.code is DiagnosticCode.UNEXPECTED_EOF
        assert diagnostic.offset == 16
        assert "Unexpected end of input at byte 16" in diagnostic.message

    def test_size_limit(self):
        """Size limit diagnostic reports the ceiling."""
        diagnostic = ErrorTemplate.size_limit_exceeded(100, 50, 120)
        assert diagnostic.code is DiagnosticCode.SIZE_LIMIT_EXCEEDED
        assert diagnostic.found == "150"

    def test_invalid_utf8(self):
        """UTF-8 diagnostic includes the decoder's reason."""
        diagnostic = ErrorTemplate.invalid_utf8(20, "invalid start byte")
        assert diagnostic.message == "Invalid UTF-8 in string at byte 20: invalid start byte"
