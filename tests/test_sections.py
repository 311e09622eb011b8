"""Tests for the sections module (splicing and excerpt extraction)."""

from docsync_engine.sections.excerpt import excerpt_text, extract_excerpt
from docsync_engine.sections.splice import update_header, update_section

EXCERPT_START = "This crate "
EXCERPT_END = r"## Crates\.io"


class TestUpdateSection:
    def test_replaces_span(self):
        doc = "## Examples\n\nOLDSTUFF\n*\n"
        new = update_section(doc, "## Examples", "*", "```lang\nfoo();\n```\n\n")
        assert new == "## Examples\n\n```lang\nfoo();\n```\n\n*\n"

    def test_preserves_surroundings(self):
        doc = "# Title\n\nIntro.\n\n## Examples\n\nold\nold\n*\n\n## Next\n"
        new = update_section(doc, "## Examples", "*", "new\n")
        assert new == "# Title\n\nIntro.\n\n## Examples\n\nnew\n*\n\n## Next\n"

    def test_missing_start_is_noop(self):
        doc = "# Title\n\nold\n*\n"
        assert update_section(doc, "## Examples", "*", "new\n") == doc

    def test_missing_end_is_noop(self):
        doc = "## Examples\n\nold\n"
        assert update_section(doc, "## Examples", "*", "new\n") == doc

    def test_start_needs_blank_line(self):
        doc = "## Examples\nold\n*\n"
        assert update_section(doc, "## Examples", "*", "new\n") == doc

    def test_end_marker_must_be_whole_line(self):
        doc = "## Examples\n\n* bullet\nold\n*\ntail\n"
        new = update_section(doc, "## Examples", "*", "new\n")
        assert new == "## Examples\n\nnew\n*\ntail\n"

    def test_end_marker_before_start_ignored(self):
        doc = "*\n## Examples\n\nold\n*\n"
        new = update_section(doc, "## Examples", "*", "new\n")
        assert new == "*\n## Examples\n\nnew\n*\n"

    def test_heading_prefix_does_not_match(self):
        doc = "## Examples and more\n\nold\n*\n"
        assert update_section(doc, "## Examples", "*", "new\n") == doc

    def test_empty_span(self):
        doc = "## Examples\n\n*\n"
        new = update_section(doc, "## Examples", "*", "new\n")
        assert new == "## Examples\n\nnew\n*\n"

    def test_end_marker_at_end_without_newline(self):
        doc = "## Examples\n\nold\n*"
        assert update_section(doc, "## Examples", "*", "new\n") == "## Examples\n\nnew\n*"

    def test_marker_text_is_literal(self):
        doc = "## Ex.mples\n\nold\n*\n"
        assert update_section(doc, "## Examples", "*", "new\n") == doc

    def test_idempotent(self):
        doc = "## Examples\n\nOLDSTUFF\n*\n"
        once = update_section(doc, "## Examples", "*", "block\n\n")
        twice = update_section(once, "## Examples", "*", "block\n\n")
        assert once == twice


class TestUpdateHeader:
    def test_replaces_leading_run(self):
        doc = "//! old one\n//! old two\nmod a;\n"
        new = update_header(doc, "//! ", "//! new\n")
        assert new == "//! new\nmod a;\n"

    def test_boundary_line_preserved(self):
        doc = "//! old\n\nmod a;\n"
        assert update_header(doc, "//! ", "//! new\n") == "//! new\n\nmod a;\n"

    def test_bare_comment_lines_belong_to_run(self):
        doc = "//! old\n//!\n//! more\nuse x;\n"
        assert update_header(doc, "//! ", "//! new\n") == "//! new\nuse x;\n"

    def test_run_not_at_top(self):
        doc = "#![allow(dead_code)]\n//! old\nmod a;\n"
        new = update_header(doc, "//! ", "//! new\n")
        assert new == "#![allow(dead_code)]\n//! new\nmod a;\n"

    def test_only_first_run_replaced(self):
        doc = "//! old\nmod a;\n//! later\n"
        new = update_header(doc, "//! ", "//! new\n")
        assert new == "//! new\nmod a;\n//! later\n"

    def test_no_run_is_noop(self):
        doc = "mod a;\n// plain comment\n"
        assert update_header(doc, "//! ", "//! new\n") == doc

    def test_other_comment_styles_end_run(self):
        doc = "//! old\n/// item doc\npub fn f() {}\n"
        new = update_header(doc, "//! ", "//! new\n")
        assert new == "//! new\n/// item doc\npub fn f() {}\n"

    def test_run_reaching_end_of_file(self):
        assert update_header("//! old", "//! ", "//! new\n") == "//! new\n"

    def test_run_reaching_end_of_file_with_newline(self):
        assert update_header("mod a;\n//! old\n", "//! ", "//! new\n") == "mod a;\n//! new\n"

    def test_idempotent(self):
        doc = "//! old\nmod a;\n"
        replacement = "//! Line.\n//!\n//! Other.\n"
        once = update_header(doc, "//! ", replacement)
        assert update_header(once, "//! ", replacement) == once


class TestExtractExcerpt:
    def test_bullet_becomes_comment(self):
        doc = "This crate does things.\n* Feature A does X.\n## Crates.io\n"
        lines = extract_excerpt(doc, EXCERPT_START, EXCERPT_END)
        assert lines == ["//! This crate does things.", "//! Feature A does X."]

    def test_trailing_whitespace_stripped(self):
        doc = "This crate rocks.  \n* Feature A does X. \t\n## Crates.io\n"
        lines = extract_excerpt(doc, EXCERPT_START, EXCERPT_END)
        assert lines[1] == "//! Feature A does X."
        assert all(line == line.rstrip() for line in lines)

    def test_blank_lines_kept_as_bare_comments(self):
        doc = "This crate rocks.\n\nMore.\n\n## Crates.io\n"
        lines = extract_excerpt(doc, EXCERPT_START, EXCERPT_END)
        assert lines == ["//! This crate rocks.", "//!", "//! More.", "//!"]

    def test_text_before_start_ignored(self):
        doc = "# Title\n\nThis crate rocks.\n## Crates.io\nafter\n"
        lines = extract_excerpt(doc, EXCERPT_START, EXCERPT_END)
        assert lines == ["//! This crate rocks."]

    def test_start_must_begin_line(self):
        doc = "Note: This crate rocks.\n## Crates.io\n"
        assert extract_excerpt(doc, EXCERPT_START, EXCERPT_END) == []

    def test_missing_end_gives_empty(self):
        doc = "This crate rocks.\n"
        assert extract_excerpt(doc, EXCERPT_START, EXCERPT_END) == []

    def test_missing_start_gives_empty(self):
        assert extract_excerpt("## Crates.io\n", EXCERPT_START, EXCERPT_END) == []

    def test_end_before_start_ignored(self):
        doc = "## Crates.io\nThis crate rocks.\n## Crates.io\n"
        lines = extract_excerpt(doc, EXCERPT_START, EXCERPT_END)
        assert lines == ["//! This crate rocks."]

    def test_star_without_space_is_prefixed(self):
        doc = "This crate rocks.\n*\n## Crates.io\n"
        lines = extract_excerpt(doc, EXCERPT_START, EXCERPT_END)
        assert lines[-1] == "//! *"

    def test_custom_prefixes(self):
        doc = "This crate rocks.\n- item\n## Crates.io\n"
        lines = extract_excerpt(
            doc, EXCERPT_START, EXCERPT_END, comment_prefix="## ", bullet_prefix="- ",
        )
        assert lines == ["## This crate rocks.", "## item"]


class TestExcerptText:
    def test_joins_with_trailing_newline(self):
        assert excerpt_text(["//! a", "//!"]) == "//! a\n//!\n"

    def test_empty(self):
        assert excerpt_text([]) == ""

    def test_feeds_update_header(self):
        doc = "This crate rocks.\n\n* Fast.\n## Crates.io\n"
        header = excerpt_text(extract_excerpt(doc, EXCERPT_START, EXCERPT_END))
        lib = "//! stale\nmod a;\n"
        assert update_header(lib, "//! ", header) == "//! This crate rocks.\n//!\n//! Fast.\nmod a;\n"


class TestUnusualLineBreakCharacters:
    def test_form_feed_stays_inside_header_line(self):
        doc = "//! a\x0cb\nmod a;\n"
        assert update_header(doc, "//! ", "//! new\n") == "//! new\nmod a;\n"

    def test_line_separator_stays_inside_header_line(self):
        doc = "//! a\u2028b\nmod a;\n"
        assert update_header(doc, "//! ", "//! new\n") == "//! new\nmod a;\n"

    def test_crlf_excerpt_lines_lose_carriage_return(self):
        doc = "This crate rocks.  \r\n* Fast.\r\n\r\n## Crates.io\r\n"
        lines = extract_excerpt(doc, EXCERPT_START, EXCERPT_END)
        assert lines == ["//! This crate rocks.", "//! Fast.", "//!"]

    def test_excerpt_line_not_split(self):
        doc = "This crate rocks.\n* Page\x0cbreak.\n## Crates.io\n"
        lines = extract_excerpt(doc, EXCERPT_START, EXCERPT_END)
        assert lines == ["//! This crate rocks.", "//! Page\x0cbreak."]
