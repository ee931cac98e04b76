"""Unit tests for selection list labels."""

import pytest
from snapman.core.formatter import (
    change_choices,
    channel_choices,
    connection_choices,
    extract_change_id,
    extract_channel_name,
    extract_revision,
    format_change,
    format_channel,
    format_revision,
    name_choices,
    revision_choices,
)
from snapman.models.snap import Channel, Connection, PendingChange, Revision, RevisionStatus


class TestChannelLabels:
    """Tests for channel labels."""

    @pytest.mark.parametrize(
        ("channel", "expected"),
        [
            (Channel("stable", "1.2.3", 100), "stable - 1.2.3 (100)"),
            (Channel("beta", "2.0"), "beta - 2.0"),
            (Channel("edge"), "edge"),
        ],
    )
    def test_format_channel(self, channel: Channel, expected: str) -> None:
        """Labels depend on what is known about the channel."""
        assert format_channel(channel) == expected

    def test_name_survives_label(self) -> None:
        """The channel name is recovered from every label shape."""
        for channel in (Channel("1.2/stable", "1.2.7", 77), Channel("edge")):
            assert extract_channel_name(format_channel(channel)) == channel.name

    def test_choices_carry_name(self) -> None:
        """Channel choices hand the bare name to the refresh command."""
        choices = channel_choices([Channel("stable", "1.0", 1)])

        assert choices[0].label == "stable - 1.0 (1)"
        assert choices[0].value == "stable"


class TestRevisionLabels:
    """Tests for revision labels."""

    def test_format_revision(self) -> None:
        """Revision label shows version, revision and status."""
        revision = Revision("2.0", 55, RevisionStatus.DISABLED)

        assert format_revision(revision) == "2.0 (Rev: 55) - disabled"

    def test_extract_revision(self) -> None:
        """The revision number is recovered from a label."""
        label = format_revision(Revision("128.0", 4336))

        assert extract_revision(label) == 4336

    def test_extract_revision_without_marker(self) -> None:
        """A label without a revision marker gives None."""
        assert extract_revision("2.0 - current") is None

    def test_choices_carry_record(self) -> None:
        """Revision choices hand the whole record to the confirm step."""
        revision = Revision("2.0", 55)

        assert revision_choices([revision])[0].value is revision


class TestChangeLabels:
    """Tests for change labels."""

    def test_format_change(self) -> None:
        """Change label joins id, status and summary."""
        change = PendingChange("42", "Doing", 'Install "vlc" snap')

        assert format_change(change) == '42 - Doing - Install "vlc" snap'
        assert extract_change_id(format_change(change)) == "42"

    def test_choices_carry_id(self) -> None:
        """Change choices hand the ID to the abort command."""
        choices = change_choices([PendingChange("7", "Wait")])

        assert choices[0].value == "7"
        assert choices[0].label == "7 - Wait - (no summary)"


class TestOtherChoices:
    """Tests for connection and plain name choices."""

    def test_connection_choices(self) -> None:
        """Connections are listed and selected by plug name."""
        choices = connection_choices([Connection("camera", "vlc:camera", "-")])

        assert choices[0].label == "vlc:camera"
        assert choices[0].value == "vlc:camera"

    def test_name_choices(self) -> None:
        """Plain names are both label and value."""
        assert [(c.label, c.value) for c in name_choices(["a", "b"])] == [("a", "a"), ("b", "b")]
