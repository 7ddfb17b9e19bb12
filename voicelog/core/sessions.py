# voicelog/core/sessions.py


class SessionRegistry:
    """
    Runtime-only store of open voice sessions.

    Holds:
    - user_id -> join timestamp (ms, UTC)
    - user_id -> guild_id the session was opened in

    One entry per user at most. Lost on restart; anyone who leaves after a
    restart is logged with a zero duration.

    The voice log cog only calls start/end/get/items, so a durable backend
    with the same methods can be passed in instead.
    """

    def __init__(self):
        self._joined_at: dict[int, int] = {}
        self._guild_of: dict[int, int | None] = {}

    def start(self, user_id: int, joined_at_ms: int, guild_id: int | None = None) -> None:
        self._joined_at[user_id] = joined_at_ms
        self._guild_of[user_id] = guild_id

    def end(self, user_id: int) -> int | None:
        # removal is idempotent: a second end() for the same user returns None
        self._guild_of.pop(user_id, None)
        return self._joined_at.pop(user_id, None)

    def get(self, user_id: int) -> int | None:
        return self._joined_at.get(user_id)

    def guild_of(self, user_id: int) -> int | None:
        return self._guild_of.get(user_id)

    def items(self, guild_id: int | None = None) -> list[tuple[int, int]]:
        """(user_id, joined_at_ms) pairs, only those opened in guild_id if given."""
        if guild_id is None:
            return list(self._joined_at.items())
        return [(uid, ts) for uid, ts in self._joined_at.items() if self._guild_of.get(uid) == guild_id]

    def clear(self) -> None:
        self._joined_at.clear()
        self._guild_of.clear()

    def __contains__(self, user_id: int) -> bool:
        return user_id in self._joined_at

    def __len__(self) -> int:
        return len(self._joined_at)
