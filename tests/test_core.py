"""Tests for transition classification and the session registry."""

from voicelog.core.sessions import SessionRegistry
from voicelog.core.timecore import ms_to_datetime, now_utc_ms
from voicelog.core.transitions import JOIN, LEAVE, MOVE, NONE, classify


class TestClassify:
    """Tests for classify()."""

    def test_join(self):
        assert classify(None, 123) == JOIN

    def test_leave(self):
        assert classify(123, None) == LEAVE

    def test_move(self):
        """Switching channels is not a join or a leave."""
        assert classify(123, 456) == MOVE

    def test_same_channel_is_none(self):
        """Mute/deafen updates keep the channel."""
        assert classify(123, 123) == NONE

    def test_no_channels_is_none(self):
        assert classify(None, None) == NONE


class TestSessionRegistry:
    """Tests for SessionRegistry."""

    def test_starts_empty(self):
        registry = SessionRegistry()
        assert len(registry) == 0
        assert registry.items() == []

    def test_start_and_get(self):
        registry = SessionRegistry()
        registry.start(1, 1000)
        assert 1 in registry
        assert registry.get(1) == 1000

    def test_start_overwrites(self):
        """At most one entry per user."""
        registry = SessionRegistry()
        registry.start(1, 1000)
        registry.start(1, 5000)
        assert len(registry) == 1
        assert registry.get(1) == 5000

    def test_end_returns_and_removes(self):
        registry = SessionRegistry()
        registry.start(1, 1000)
        assert registry.end(1) == 1000
        assert 1 not in registry

    def test_end_is_idempotent(self):
        registry = SessionRegistry()
        registry.start(1, 1000)
        registry.end(1)
        assert registry.end(1) is None
        assert registry.end(2) is None
        assert len(registry) == 0

    def test_items_is_a_snapshot(self):
        registry = SessionRegistry()
        registry.start(1, 1000)
        snapshot = registry.items()
        registry.start(2, 2000)
        assert snapshot == [(1, 1000)]

    def test_items_filtered_by_guild(self):
        registry = SessionRegistry()
        registry.start(1, 1000, guild_id=10)
        registry.start(2, 2000, guild_id=20)
        registry.start(3, 3000)
        assert registry.items(10) == [(1, 1000)]
        assert registry.items(20) == [(2, 2000)]
        assert len(registry.items()) == 3

    def test_end_forgets_guild(self):
        registry = SessionRegistry()
        registry.start(1, 1000, guild_id=10)
        registry.end(1)
        assert registry.guild_of(1) is None
        assert registry.items(10) == []

    def test_clear(self):
        registry = SessionRegistry()
        registry.start(1, 1000)
        registry.clear()
        assert len(registry) == 0


class TestTimecore:
    """Tests for time helpers."""

    def test_now_is_milliseconds(self):
        # well past 2001-09-09 in ms, well before year 33658 in ms
        assert 10**12 < now_utc_ms() < 10**15

    def test_ms_to_datetime_truncates_to_seconds(self):
        assert ms_to_datetime(126999).timestamp() == 126
