"""Tests for the markdown document parser."""

from __future__ import annotations

from sqltips.parser import parse_document


class TestParseDocument:
    """Tests for parse_document."""

    def test_extracts_title_intro_toc_and_sections(self, small_document: str) -> None:
        document = parse_document(small_document)

        assert document.title == "Tips"
        assert document.intro == ["Some intro text."]
        assert [entry.anchor for entry in document.toc] == ["first-tip", "second-tip"]
        assert [section.title for section in document.sections] == ["First tip", "Second tip"]
        assert document.toc_heading is not None
        assert document.toc_heading.text == "Table of contents"

    def test_section_prose_and_examples(self, small_document: str) -> None:
        document = parse_document(small_document)
        first = document.sections[0]

        assert first.slug == "first-tip"
        assert first.prose == ["Explain the first tip."]
        assert len(first.examples) == 1
        assert first.examples[0].language == "sql"
        assert first.examples[0].content == "SELECT 1;"
        assert first.examples[0].is_sql

    def test_toc_span_covers_list(self, small_document: str) -> None:
        document = parse_document(small_document)
        lines = small_document.splitlines()

        start, end = document.toc_span
        assert lines[start:end] == [
            "- [First tip](#first-tip)",
            "- [Second tip](#second-tip)",
        ]

    def test_toc_without_heading_in_intro(self) -> None:
        text = "# Title\n\n* [A](#a)\n* [B](#b)\n\n## A\n\nText.\n\n## B\n\nText.\n"

        document = parse_document(text)

        assert document.toc_heading is None
        assert [entry.anchor for entry in document.toc] == ["a", "b"]
        assert document.intro == []

    def test_nested_toc_entries_have_depth(self) -> None:
        text = "# T\n\n- [A](#a)\n  - [Sub](#sub)\n\n## A\n\nText.\n\n### Sub\n\nMore.\n"

        document = parse_document(text)

        assert [(entry.anchor, entry.depth) for entry in document.toc] == [("a", 0), ("sub", 1)]
        assert document.sections[0].subheadings[0].slug == "sub"

    def test_headings_inside_code_are_ignored(self) -> None:
        text = "# T\n\n## Real\n\nText.\n\n```sql\n## not a heading\nSELECT 1;\n```\n"

        document = parse_document(text)

        assert [heading.text for heading in document.headings] == ["T", "Real"]
        assert document.sections[0].examples[0].content == "## not a heading\nSELECT 1;"

    def test_tilde_fence_and_longer_closing_fence(self) -> None:
        text = "## A\n\nText.\n\n~~~SQL\nSELECT 1;\n~~~~\n"

        document = parse_document(text)

        example = document.sections[0].examples[0]
        assert example.language == "sql"
        assert example.closed

    def test_unclosed_fence_is_flagged(self) -> None:
        text = "## A\n\nText.\n\n```sql\nSELECT 1;\n"

        document = parse_document(text)

        assert document.code_blocks[0].closed is False
        assert document.code_blocks[0].content == "SELECT 1;"

    def test_untagged_fence_has_no_language(self) -> None:
        document = parse_document("## A\n\nText.\n\n```\nx\n```\n")

        assert document.code_blocks[0].language is None

    def test_closing_hashes_removed(self) -> None:
        document = parse_document("## Indent your code ##\n\nText.\n")

        assert document.sections[0].title == "Indent your code"
        assert document.sections[0].slug == "indent-your-code"

    def test_duplicate_headings_get_suffixes(self) -> None:
        document = parse_document("## Example\n\nA.\n\n## Example\n\nB.\n")

        assert [section.slug for section in document.sections] == ["example", "example-1"]

    def test_html_anchors_collected(self) -> None:
        text = '<a name="top"></a>\n# T\n\n## A\n\n<a id="details"></a>\nText.\n'

        document = parse_document(text)

        assert document.html_anchors == ["top", "details"]

    def test_anchor_only_paragraph_is_not_prose(self) -> None:
        document = parse_document('## A\n\n<a name="x"></a>\n\n```sql\nSELECT 1;\n```\n')

        assert document.sections[0].prose == []

    def test_section_markdown_keeps_body_order(self) -> None:
        text = "## A\n\nFirst.\n\n```sql\nSELECT 1;\n```\n\nSecond.\n\n## B\n\nOther.\n"

        document = parse_document(text)

        assert document.sections[0].markdown == "First.\n\n```sql\nSELECT 1;\n```\n\nSecond."
        assert document.sections[1].markdown == "Other."

    def test_list_links_after_first_section_are_not_toc(self) -> None:
        text = "## A\n\nSee:\n\n- [B](#b)\n\n## B\n\nText.\n"

        document = parse_document(text)

        assert document.toc == []
        assert "- [B](#b)" in document.sections[0].prose[1]

    def test_commented_out_heading_is_ignored(self) -> None:
        text = (
            "# T\n\n- [A](#a)\n\n## A\n\nText.\n\n"
            "<!--\n## Draft tip\n\n- [Draft](#draft)\n```sql\nSELECT (;\n```\n-->\n"
        )

        document = parse_document(text)

        assert [heading.text for heading in document.headings] == ["T", "A"]
        assert [section.slug for section in document.sections] == ["a"]
        assert document.code_blocks == []
        assert document.sections[0].prose == ["Text."]

    def test_text_around_comments_is_kept(self) -> None:
        text = "## A\n\nBefore <!-- hidden --> after.\nStart <!--\n<a name=\"gone\"></a>\n--> End.\n"

        document = parse_document(text)

        assert document.sections[0].prose == ["Before  after.\nStart \n End."]
        assert document.html_anchors == []

    def test_comment_only_paragraph_is_not_prose(self) -> None:
        document = parse_document("## A\n\n<!-- TODO: write this -->\n\n```sql\nSELECT 1;\n```\n")

        assert document.sections[0].prose == []
