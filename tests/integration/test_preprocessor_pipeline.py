"""Integration tests for a full transform run over realistic books."""

import io
import json

import pytest
from utils import FRONTMATTER_PAYLOAD, make_book, make_chapter, make_context, make_payload

from mdbook_frontmatter.cli import main
from mdbook_frontmatter.constants import EXIT_ERROR, EXIT_SUCCESS


def _process(payload: str) -> tuple[int, str]:
    stdout = io.BytesIO()
    code = main([], stdin=io.BytesIO(payload.encode("utf-8")), stdout=stdout)
    return code, stdout.getvalue().decode("utf-8")


def _strip_frontmatter(items):
    """Return the wire items with every frontmatter mapping reduced to its keys."""
    stripped = []
    for item in items:
        if isinstance(item, dict) and "Chapter" in item:
            chapter = dict(item["Chapter"])
            chapter["frontmatter"] = sorted(chapter["frontmatter"])
            chapter["sub_items"] = _strip_frontmatter(chapter["sub_items"])
            stripped.append({"Chapter": chapter})
        else:
            stripped.append(item)
    return stripped


@pytest.mark.integration
class TestPreprocessorPipeline:
    """Run the CLI over complete payloads."""

    def test_reference_book(self):
        code, output = _process(FRONTMATTER_PAYLOAD)

        assert code == EXIT_SUCCESS
        book = json.loads(output)
        expected_input = json.loads(FRONTMATTER_PAYLOAD)[1]
        assert _strip_frontmatter(book["sections"]) == _strip_frontmatter(expected_input["sections"])
        assert book["sections"][0]["Chapter"]["frontmatter"] == {
            "author": "GRANT (@GRANTKEE)",
            "date": "08-02-2024",
        }
        assert book["__non_exhaustive"] is None

    def test_nested_book_keeps_shape(self, nested_book_dict):
        code, output = _process(make_payload(nested_book_dict))

        assert code == EXIT_SUCCESS
        book = json.loads(output)
        assert _strip_frontmatter(book["sections"]) == _strip_frontmatter(nested_book_dict["sections"])

        chapter_1 = book["sections"][0]["Chapter"]
        assert chapter_1["frontmatter"] == {"author": "GRANT (@GRANTKEE)", "date": "08-02-2024"}
        assert chapter_1["sub_items"][0]["Chapter"]["frontmatter"] == {"date": "09-10-2024"}
        assert book["sections"][1] == "Separator"
        assert book["sections"][2] == {"PartTitle": "Appendix"}
        assert book["sections"][3]["Chapter"]["frontmatter"] == {"kind": "REFERENCE"}

    def test_content_is_not_modified(self):
        chapter = make_chapter("Lower Case", frontmatter={"note": "keep body"})
        chapter["Chapter"]["content"] = "# lower case body\n\nsome text"

        code, output = _process(make_payload(make_book(chapter)))

        assert code == EXIT_SUCCESS
        result = json.loads(output)["sections"][0]["Chapter"]
        assert result["content"] == "# lower case body\n\nsome text"
        assert result["name"] == "Lower Case"
        assert result["frontmatter"] == {"note": "KEEP BODY"}

    def test_mismatched_host_version_still_transforms(self):
        payload = make_payload(
            make_book(make_chapter("One", frontmatter={"date": "1999-12-31"})),
            make_context(mdbook_version="1.2.0"),
        )

        code, output = _process(payload)

        assert code == EXIT_SUCCESS
        assert json.loads(output)["sections"][0]["Chapter"]["frontmatter"] == {"date": "12-31-1999"}

    def test_date_key_from_book_toml(self):
        config = {"book": {"title": "T"}, "preprocessor": {"frontmatter": {"date-key": "updated"}}}
        payload = make_payload(
            make_book(make_chapter("One", frontmatter={"updated": "2020-02-29", "date": "n/a"})),
            make_context(config=config),
        )

        code, output = _process(payload)

        assert code == EXIT_SUCCESS
        assert json.loads(output)["sections"][0]["Chapter"]["frontmatter"] == {"updated": "02-29-2020", "date": "N/A"}

    def test_deep_malformed_date_aborts_whole_book(self):
        deep = make_chapter("Deep", frontmatter={"date": "2024-8-2"})
        payload = make_payload(
            make_book(
                make_chapter("Top", frontmatter={"date": "2024-08-02"}, sub_items=[deep]),
                make_chapter("After", frontmatter={"date": "2024-08-03"}),
            )
        )

        code, output = _process(payload)

        assert code == EXIT_ERROR
        assert output == ""

    def test_bad_option_type_fails(self):
        config = {"preprocessor": {"frontmatter": {"date-key": ["date"]}}}
        payload = make_payload(make_book(make_chapter("One")), make_context(config=config))

        code, output = _process(payload)

        assert code == EXIT_ERROR
        assert output == ""
