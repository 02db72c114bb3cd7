"""Unit tests for the chapter walker."""

import copy

import pytest

from mdbook_frontmatter.book import Book, Chapter, PartTitle, Separator
from mdbook_frontmatter.exceptions import InvalidDateFormatError
from mdbook_frontmatter.transforms import FrontmatterTransform, iter_chapters, walk


def _shape(items):
    """Reduce a list of items to a comparable structure without frontmatter."""
    shape = []
    for item in items:
        if isinstance(item, Chapter):
            shape.append(("chapter", item.name, item.number, item.path, _shape(item.sub_items)))
        elif isinstance(item, PartTitle):
            shape.append(("part", item.title))
        else:
            shape.append(("separator",))
    return shape


@pytest.mark.unit
class TestWalk:
    """Test walk()."""

    def test_visits_chapters_pre_order(self, nested_book):
        visited = []

        walk(nested_book, lambda chapter: visited.append(chapter.name))

        assert visited == ["Intro", "Chapter 1", "Section 1.1", "Deep", "Section 1.2", "Chapter 2"]

    def test_returns_same_book(self, nested_book):
        assert walk(nested_book, lambda chapter: None) is nested_book

    def test_skips_structural_items(self, nested_book):
        visited = []

        walk(nested_book, visited.append)

        assert all(isinstance(item, Chapter) for item in visited)
        assert len(visited) == 6

    def test_empty_book(self):
        visited = []

        walk(Book(), visited.append)

        assert visited == []

    def test_only_separators(self):
        visited = []
        book = Book(sections=[Separator(), PartTitle(title="Part"), Separator()])

        walk(book, visited.append)

        assert visited == []

    def test_transform_preserves_shape(self, nested_book):
        before = _shape(nested_book.sections)

        walk(nested_book, FrontmatterTransform())

        assert _shape(nested_book.sections) == before

    def test_transform_mutates_every_chapter(self, nested_book):
        walk(nested_book, FrontmatterTransform())

        frontmatters = {chapter.name: chapter.frontmatter for chapter in iter_chapters(nested_book.sections)}
        assert frontmatters == {
            "Intro": {"title": "WELCOME"},
            "Chapter 1": {"author": "ADA", "date": "12-31-2023"},
            "Section 1.1": {"date": "01-15-2024"},
            "Deep": {"tag": "DEEP"},
            "Section 1.2": {},
            "Chapter 2": {"status": "DRAFT"},
        }

    def test_aborts_on_first_failure(self):
        visited = []
        transform = FrontmatterTransform()

        def visit(chapter):
            visited.append(chapter.name)
            transform(chapter)

        book = Book(
            sections=[
                Chapter(name="Good", frontmatter={"date": "2024-01-01"}),
                Chapter(name="Bad", frontmatter={"date": "2024-1-1"}),
                Chapter(name="Never", frontmatter={"date": "2024-02-02"}),
            ]
        )

        with pytest.raises(InvalidDateFormatError):
            walk(book, visit)

        assert visited == ["Good", "Bad"]
        assert book.sections[2].frontmatter == {"date": "2024-02-02"}

    def test_failure_in_sub_item_stops_later_siblings(self):
        book = Book(
            sections=[
                Chapter(name="Parent", sub_items=[Chapter(name="Child", frontmatter={"date": "x"})]),
                Chapter(name="Sibling", frontmatter={"a": "b"}),
            ]
        )
        untouched = copy.deepcopy(book.sections[1])

        with pytest.raises(InvalidDateFormatError):
            walk(book, FrontmatterTransform())

        assert book.sections[1] == untouched

    def test_unknown_item_type_raises(self):
        book = Book(sections=[object()])  # type: ignore[list-item]

        with pytest.raises(TypeError, match="Unknown book item type"):
            walk(book, lambda chapter: None)


@pytest.mark.unit
class TestIterChapters:
    """Test iter_chapters()."""

    def test_matches_walk_order(self, nested_book):
        walked = []
        walk(nested_book, lambda chapter: walked.append(chapter))

        assert list(iter_chapters(nested_book.sections)) == walked

    @pytest.mark.parametrize("chapters,separators", [(0, 0), (1, 0), (3, 2), (5, 5)])
    def test_counts_chapters_not_separators(self, chapters, separators):
        items = [Chapter(name=f"C{i}", frontmatter={"k": "v"}) for i in range(chapters)]
        items += [Separator() for _ in range(separators)]
        book = Book(sections=items)
        visits = []

        walk(book, visits.append)

        assert len(visits) == chapters
        assert len(book.sections) == chapters + separators
