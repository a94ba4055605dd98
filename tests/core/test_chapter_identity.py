"""Unit tests for chapter identity resolution."""

import pytest

from manga_catalog.core import (
    chapter_sort_key,
    is_special_identity,
    is_valid_identity,
    resolve_identity,
)


class TestSpecialIdentity:
    """The oneshot folder is the single unnumbered release."""

    @pytest.mark.parametrize("raw", ["oneshot", "Oneshot", "ONESHOT"])
    def test_special_is_case_insensitive(self, raw):
        assert is_special_identity(raw)

    def test_special_resolves_to_rank_zero_and_first_sort_key(self):
        identity = resolve_identity("oneshot")

        assert identity.is_special
        assert identity.sort_key == -1
        assert identity.rank == 0
        assert identity.title == "Oneshot"

    def test_special_sorts_before_chapter_zero(self):
        names = ["0", "12", "oneshot", "0.5"]
        assert sorted(names, key=chapter_sort_key) == ["oneshot", "0", "0.5", "12"]


class TestNumberedIdentity:
    """Numbered chapters use their parsed value."""

    def test_integer_chapter(self):
        identity = resolve_identity("3")

        assert not identity.is_special
        assert identity.sort_key == 3
        assert identity.rank == 3
        assert identity.title == "Chapter 3"

    def test_decimal_chapter(self):
        identity = resolve_identity("3.5")

        assert identity.sort_key == 3.5
        assert identity.rank == 3.5

    def test_title_preserves_raw_string(self):
        assert resolve_identity("3.00").title == "Chapter 3.00"
        assert resolve_identity("3").title == "Chapter 3"

    def test_numeric_sort_not_lexicographic(self):
        assert sorted(["10", "2", "1.5"], key=chapter_sort_key) == ["1.5", "2", "10"]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1", True),
        ("12.5", True),
        ("oneshot", True),
        ("-1", False),
        ("1.", False),
        ("extra", False),
        ("1a", False),
        ("", False),
    ],
)
def test_is_valid_identity(raw, expected):
    assert is_valid_identity(raw) is expected
