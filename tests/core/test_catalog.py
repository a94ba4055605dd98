"""Unit tests for catalog entities and their persisted shape."""

import pytest

from manga_catalog.core import Catalog, ChapterRecord, WorkConfig, WorkInfo


def make_record(identity, **overrides):
    values = dict(identity=identity, upload_timestamp="2024-01-01T10:00:00+07:00")
    values.update(overrides)
    values.setdefault("title", f"Chapter {identity}")
    if "rank" not in values:
        values["rank"] = float(identity)
    return ChapterRecord(**values)


class TestChapterRecord:
    def test_to_dict_writes_persisted_fields(self):
        record = make_record("3", page_count=20, locked=True, view_count=7, storage_exists=True)

        assert record.to_dict() == {
            "title": "Chapter 3",
            "chapter": 3,
            "folder": "3",
            "uploadDate": "2024-01-01T10:00:00+07:00",
            "totalPages": 20,
            "pages": 20,
            "locked": True,
            "views": 7,
        }

    def test_to_dict_keeps_fractional_rank(self):
        assert make_record("3.5").to_dict()["chapter"] == 3.5

    def test_from_dict_fills_missing_fields(self):
        record = ChapterRecord.from_dict("oneshot", {"uploadDate": "2024-02-01T00:00:00+07:00"})

        assert record.title == "Oneshot"
        assert record.rank == 0
        assert record.page_count == 0
        assert record.view_count == 0
        assert record.locked is False
        assert record.storage_exists is False

    def test_from_dict_drops_non_string_upload_date(self):
        record = ChapterRecord.from_dict("5", {"uploadDate": 12345, "locked": True})

        assert record.upload_timestamp == ""
        assert record.locked is True

    def test_from_dict_tolerates_unknown_identity(self):
        record = ChapterRecord.from_dict("extras", {"views": 4})

        assert record.title == "extras"
        assert record.view_count == 4


class TestCatalog:
    def test_to_dict_orders_chapters_special_first(self):
        work = WorkInfo(title="Test", repo_url="https://example.invalid/")
        catalog = Catalog(
            work=work,
            chapters={
                "10": make_record("10"),
                "2": make_record("2"),
                "oneshot": make_record("oneshot", title="Oneshot", rank=0),
            },
        )

        assert list(catalog.to_dict()["chapters"]) == ["oneshot", "2", "10"]

    def test_work_end_chapter_only_written_when_set(self):
        work = WorkInfo(title="Test", repo_url="u")
        assert "endChapter" not in work.to_dict()

        work.end_chapter = "42"
        assert work.to_dict()["endChapter"] == "42"

    def test_from_dict_reads_work_section(self):
        catalog = Catalog.from_dict(
            {
                "work": {"title": "Test", "views": 10, "repoUrl": "u"},
                "chapters": {"1": {"uploadDate": "t", "views": 3, "locked": True}},
                "lastUpdated": "a",
                "lastChapterUpdate": "b",
            }
        )

        assert catalog.work.views == 10
        assert catalog.chapters["1"].view_count == 3
        assert catalog.chapters["1"].locked is True
        assert catalog.last_chapter_update == "b"

    def test_from_dict_accepts_legacy_manga_key(self):
        catalog = Catalog.from_dict({"manga": {"title": "Old", "views": 99}, "chapters": {}})

        assert catalog.work.title == "Old"
        assert catalog.work.views == 99

    def test_from_dict_without_work_section_raises(self):
        with pytest.raises(ValueError, match="no work section"):
            Catalog.from_dict({"chapters": {}})

    def test_from_dict_rejects_non_object_chapters(self):
        with pytest.raises(ValueError, match="chapters must be a JSON object"):
            Catalog.from_dict({"work": {"title": "T"}, "chapters": [1]})

    def test_from_dict_drops_non_string_catalog_dates(self):
        catalog = Catalog.from_dict(
            {"work": {"title": "T", "lockedChapters": 5}, "lastUpdated": 1, "lastChapterUpdate": None}
        )

        assert catalog.last_updated == ""
        assert catalog.last_chapter_update == ""
        assert catalog.work.locked_chapters == []

    def test_total_chapter_views(self):
        catalog = Catalog(
            work=WorkInfo(title="T", repo_url="u"),
            chapters={"1": make_record("1", view_count=5), "2": make_record("2", view_count=6)},
        )
        assert catalog.total_chapter_views == 11


class TestWorkConfig:
    def test_defaults_applied(self):
        config = WorkConfig.from_dict({"title": "T", "repoOwner": "me", "repoName": "repo"})

        assert config.image_prefix == "Image"
        assert config.image_format == "jpg"
        assert config.type == "manga"
        assert config.locked_chapters == []
        assert config.repo_url == "https://raw.githubusercontent.com/me/repo/main/"

    def test_locked_identities_are_strings(self):
        config = WorkConfig.from_dict({"title": "T", "lockedChapters": [5, "6.5"]})

        assert config.locked_chapters == ["5", "6.5"]
        assert config.is_locked("5")
        assert not config.is_locked("7")

    def test_is_locked_matches_any_oneshot_spelling(self):
        config = WorkConfig.from_dict({"title": "T", "lockedChapters": ["Oneshot"]})

        assert config.is_locked("oneshot")
        assert config.is_locked("ONESHOT")
        assert not config.is_locked("1")

    def test_rejects_non_list_locked_chapters(self):
        with pytest.raises(ValueError, match="lockedChapters"):
            WorkConfig.from_dict({"title": "T", "lockedChapters": "5"})

    def test_rejects_non_object(self):
        with pytest.raises(ValueError):
            WorkConfig.from_dict(["not", "an", "object"])
