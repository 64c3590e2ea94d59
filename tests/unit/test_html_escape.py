#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_escape.py
"""Unit tests for identifier HTML escaping."""

import re
from io import StringIO

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import FailingSink

from md2html.exceptions import OutputWriteError
from md2html.utils.html_utils import escape_html, write_escaped_html

BARE_AMPERSAND = re.compile(r"&(?!(?:quot|amp|#47|lt|gt);)")


@pytest.mark.unit
class TestEscapeHtml:
    """Tests for the character substitutions."""

    def test_reserved_characters(self):
        """Test the mixed reserved-character example."""
        assert escape_html("<b>&\"'</b>") == "&lt;b&gt;&amp;&quot;&#47;&lt;/b&gt;"

    @pytest.mark.parametrize(
        "char,entity",
        [
            ('"', "&quot;"),
            ("&", "&amp;"),
            ("'", "&#47;"),
            ("<", "&lt;"),
            (">", "&gt;"),
        ],
    )
    def test_single_substitutions(self, char, entity):
        """Test each reserved character on its own."""
        assert escape_html(char) == entity

    def test_apostrophe_uses_solidus_entity(self):
        """Test that apostrophes become &#47; rather than &#39;."""
        assert escape_html("it's") == "it&#47;s"
        assert "&#39;" not in escape_html("'")

    def test_plain_ascii_unchanged(self):
        """Test that other ASCII characters are copied verbatim."""
        text = "note-1_a/b:c d=e?f#g"
        assert escape_html(text) == text

    def test_empty_string(self):
        """Test escaping an empty string."""
        assert escape_html("") == ""

    def test_existing_entities_are_escaped_again(self):
        """Test that escaping is not idempotent for entity text."""
        assert escape_html("&amp;") == "&amp;amp;"

    def test_non_ascii_emitted_per_byte(self):
        """Test that each UTF-8 byte of non-ASCII input becomes one character."""
        assert escape_html("é") == "Ã©"
        assert len(escape_html("€")) == 3


@pytest.mark.unit
class TestWriteEscapedHtml:
    """Tests for sink-based escaping."""

    def test_appends_to_existing_buffer(self):
        """Test that output is appended, not overwritten."""
        buf = StringIO()
        buf.write("id=")
        write_escaped_html(buf, "a<b")
        assert buf.getvalue() == "id=a&lt;b"

    def test_sink_failure_raises_output_write_error(self):
        """Test that a failing sink surfaces as OutputWriteError."""
        with pytest.raises(OutputWriteError) as exc_info:
            write_escaped_html(FailingSink(), "x")
        assert isinstance(exc_info.value.original_error, OSError)
        assert exc_info.value.rendering_stage == "sink_write"


@pytest.mark.unit
@pytest.mark.fuzzing
class TestEscapeFuzzing:
    """Property-based tests for escaping totality."""

    @given(st.text())
    def test_no_reserved_characters_survive(self, text):
        """Test that no raw <, >, " or ' is left and every & starts an entity."""
        escaped = escape_html(text)
        assert "<" not in escaped
        assert ">" not in escaped
        assert '"' not in escaped
        assert "'" not in escaped
        assert BARE_AMPERSAND.search(escaped) is None

    @given(st.text())
    def test_apostrophe_count_matches_solidus_entities(self, text):
        """Test that each apostrophe adds exactly one &#47;."""
        assert escape_html(text).count("&#47;") == text.count("'")

    @given(st.text(alphabet=st.characters(max_codepoint=127, exclude_characters="\"&'<>")))
    def test_safe_ascii_is_identity(self, text):
        """Test that ASCII without reserved characters is unchanged."""
        assert escape_html(text) == text
