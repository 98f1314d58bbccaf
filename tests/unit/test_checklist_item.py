"""Unit tests for checklist item entity and its value objects."""

import pytest

from inspection_checklist.domain.entities.checklist_item import ChecklistItem
from inspection_checklist.domain.value_objects.condition_rating import ConditionRating, ReportStatus
from inspection_checklist.domain.value_objects.media import Audio, Photo


def make_photo(photo_id: str = "p1") -> Photo:
    return Photo(id=photo_id, category="Front View (45° angle)", base64="AAAA")


class TestConditionRating:
    """Test cases for ConditionRating enum."""

    def test_coerce(self):
        """Test coercion from strings and members."""
        assert ConditionRating.coerce("pass") is ConditionRating.PASS
        assert ConditionRating.coerce(" FAIL ") is ConditionRating.FAIL
        assert ConditionRating.coerce(ConditionRating.NA) is ConditionRating.NA

    def test_coerce_unknown(self):
        """Test unknown ratings are rejected."""
        with pytest.raises(ValueError, match="Unknown condition rating"):
            ConditionRating.coerce("excellent")

    def test_is_rated(self):
        """Test only unchecked counts as unrated."""
        rated = [c for c in ConditionRating if c.is_rated]

        assert ConditionRating.UNCHECKED not in rated
        assert len(rated) == 4

    def test_to_report_status(self):
        """Test mapping to report status."""
        assert ConditionRating.PASS.to_report_status() is ReportStatus.PASS
        assert ConditionRating.FAIL.to_report_status() is ReportStatus.FAIL
        assert ConditionRating.CONCERN.to_report_status() is ReportStatus.CONCERN
        assert ConditionRating.NA.to_report_status() is ReportStatus.NOT_APPLICABLE

    def test_unrated_falls_back_to_checkbox(self):
        """Test unrated items report Pass when checked, N/A otherwise."""
        assert ConditionRating.UNCHECKED.to_report_status(checked=True) is ReportStatus.PASS
        assert ConditionRating.UNCHECKED.to_report_status(checked=False) is ReportStatus.NOT_APPLICABLE


class TestMedia:
    """Test cases for photo and audio value objects."""

    def test_photo_data_url(self):
        """Test the data URL is built from MIME type and payload."""
        photo = Photo(id="p1", category="Engine Bay", base64="QUJD", mime_type="image/png")

        assert photo.data_url == "data:image/png;base64,QUJD"

    def test_photo_validation(self):
        """Test photo validation."""
        with pytest.raises(ValueError, match="Photo ID cannot be empty"):
            Photo(id=" ", category="Engine Bay", base64="")

        with pytest.raises(ValueError, match="MIME type"):
            Photo(id="p1", category="Engine Bay", base64="", mime_type="jpeg")

    def test_audio_validation(self):
        """Test audio validation."""
        assert Audio(base64="AAAA").mime_type == "audio/webm"

        with pytest.raises(ValueError, match="MIME type"):
            Audio(base64="AAAA", mime_type="")


class TestChecklistItem:
    """Test cases for ChecklistItem entity."""

    def test_defaults(self):
        """Test a fresh item is unchecked and empty."""
        item = ChecklistItem(label="Brake Pad Life (Visual)")

        assert item.checked is False
        assert item.condition is ConditionRating.UNCHECKED
        assert item.notes == ""
        assert item.photos == ()
        assert item.audio is None
        assert item.has_evidence is False

    def test_empty_label_rejected(self):
        """Test label validation."""
        with pytest.raises(ValueError, match="label cannot be empty"):
            ChecklistItem(label="  ")

    def test_condition_implies_checked(self):
        """Test setting a rating checks the item."""
        for condition in ["pass", "fail", "concern", "na"]:
            item = ChecklistItem(label="Odor Check").with_updates(condition=condition)
            assert item.checked is True
            assert item.is_rated is True

    def test_unchecking_rated_item_keeps_it_checked(self):
        """Test a rated item cannot be unchecked while rated."""
        item = ChecklistItem(label="Odor Check", condition=ConditionRating.FAIL)

        updated = item.with_updates(checked=False)

        assert updated.checked is True
        assert updated.condition is ConditionRating.FAIL

    def test_clearing_rating_frees_checkbox(self):
        """Test resetting the rating lets the checkbox be cleared."""
        item = ChecklistItem(label="Odor Check", condition=ConditionRating.PASS)

        cleared = item.with_updates(condition=ConditionRating.UNCHECKED)
        assert cleared.checked is True
        assert cleared.with_updates(checked=False).checked is False

    def test_checked_without_rating(self):
        """Test the checkbox can be toggled on an unrated item."""
        item = ChecklistItem(label="Odor Check").with_updates(checked=True)

        assert item.checked is True
        assert item.is_rated is False
        assert item.with_updates(checked=False).checked is False

    def test_partial_update_keeps_other_fields(self):
        """Test updates only touch named fields."""
        item = ChecklistItem(label="Odor Check", condition=ConditionRating.CONCERN, notes="smoke")

        updated = item.with_updates(notes="mild smoke smell")

        assert updated.notes == "mild smoke smell"
        assert updated.condition is ConditionRating.CONCERN
        assert item.notes == "smoke"

    def test_unknown_field_rejected(self):
        """Test the label and unknown fields cannot be updated."""
        item = ChecklistItem(label="Odor Check")

        with pytest.raises(ValueError, match="label"):
            item.with_updates(label="Something else")
        with pytest.raises(ValueError, match="color"):
            item.with_updates(color="red")

    def test_photo_add_and_remove(self):
        """Test photos are appended in order and removed by id."""
        item = ChecklistItem(label="Engine Oil Level & Condition")

        item = item.with_photo(make_photo("a")).with_photo(make_photo("b"))
        assert [p.id for p in item.photos] == ["a", "b"]

        item = item.without_photo("a")
        assert [p.id for p in item.photos] == ["b"]

        assert item.without_photo("missing") == item

    def test_audio_replaces_previous(self):
        """Test at most one audio note is held."""
        item = ChecklistItem(label="Engine Oil Level & Condition")

        item = item.with_audio(Audio(base64="first")).with_audio(Audio(base64="second"))

        assert item.audio.base64 == "second"
        assert item.has_evidence is True

    def test_photos_must_be_photo_instances(self):
        """Test photo type validation."""
        with pytest.raises(ValueError, match="Photo instances"):
            ChecklistItem(label="Odor Check", photos=("not a photo",))

    def test_photo_list_is_stored_as_tuple(self):
        """Test photo lists are converted to tuples."""
        item = ChecklistItem(label="Odor Check", photos=[make_photo()])

        assert isinstance(item.photos, tuple)
