# voicelog/cogs/voice_log.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace

import discord
from discord.ext import commands

from voicelog.core.duration import format_duration
from voicelog.core.sessions import SessionRegistry
from voicelog.core.timecore import now_utc_ms
from voicelog.core.transitions import JOIN, LEAVE, classify
from voicelog.ui.formatting import render_join, render_leave

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    """Outcome of one logged join/leave."""
    kind: str
    user_id: int
    at_ms: int
    channel_id: int | None = None      # join only
    duration_ms: int | None = None     # leave only
    delivered: bool = False
    error: Exception | None = None


def _channel_id(state: discord.VoiceState | None) -> int | None:
    if state is None or state.channel is None:
        return None
    return state.channel.id


def _guild_id(member) -> int | None:
    guild = getattr(member, "guild", None)
    return guild.id if guild is not None else None


class VoiceLogCog(commands.Cog):
    """
    Voice session logger:
    - Ignores bots
    - join (no channel -> channel): remember join time, post a join message
    - leave (channel -> no channel): forget join time, post a leave message with the duration
    - Channel switches are not logged and keep the original join time
    - Everything goes to one fixed log channel (Settings.log_channel_id)
    """

    def __init__(self, bot: commands.Bot, settings, registry: SessionRegistry | None = None, clock=now_utc_ms):
        self.bot = bot
        self.settings = settings
        self.registry = registry if registry is not None else SessionRegistry()
        self.clock = clock

    # ---------------- log channel ----------------

    async def resolve_log_channel(self) -> discord.abc.Messageable | None:
        channel_id = self.settings.log_channel_id

        channel = self.bot.get_channel(channel_id)
        if channel is None:
            try:
                channel = await self.bot.fetch_channel(channel_id)
            except (discord.NotFound, discord.Forbidden, discord.HTTPException, discord.InvalidData) as exc:
                log.debug("log channel %s unavailable: %s", channel_id, exc)
                return None

        if not isinstance(channel, discord.abc.Messageable):
            log.debug("log channel %s is not a text channel (%s)", channel_id, type(channel).__name__)
            return None
        return channel

    async def _send(self, channel: discord.abc.Messageable, notice: Notice, payload: dict) -> Notice:
        try:
            await channel.send(**payload)
        except discord.HTTPException as exc:
            # registry is already updated; a failed post is only reported
            log.warning("failed to post %s for user %s: %s", notice.kind, notice.user_id, exc)
            return replace(notice, delivered=False, error=exc)
        return replace(notice, delivered=True)

    # ---------------- voice state updates ----------------

    async def handle(
        self,
        member: discord.Member | None,
        before: discord.VoiceState | None,
        after: discord.VoiceState | None,
    ) -> Notice | None:
        """
        Handle one voice state change. Returns None when nothing was logged
        (bot account, channel switch / mute toggle, unreachable log channel).
        """
        if member is None or member.bot:
            return None

        before_id = _channel_id(before)
        after_id = _channel_id(after)
        kind = classify(before_id, after_id)
        if kind not in (JOIN, LEAVE):
            return None

        channel = await self.resolve_log_channel()
        if channel is None:
            return None

        # registry first; nothing below may undo it
        if kind == JOIN:
            joined_at = self.clock()
            self.registry.start(member.id, joined_at, guild_id=_guild_id(member))
            log.info("%s (%s) joined %s", member.display_name, member.id, after_id)

            notice = Notice(kind=JOIN, user_id=member.id, at_ms=joined_at, channel_id=after_id)
            payload = render_join(self.settings, member, after_id, joined_at)
        else:
            left_at = self.clock()
            joined_at = self.registry.end(member.id)
            duration_ms = left_at - joined_at if joined_at is not None else 0
            duration = format_duration(duration_ms)
            log.info("%s (%s) left voice after %s", member.display_name, member.id, duration)

            notice = Notice(kind=LEAVE, user_id=member.id, at_ms=left_at, duration_ms=duration_ms)
            payload = render_leave(self.settings, member, left_at, duration)

        return await self._send(channel, notice, payload)

    @commands.Cog.listener()
    async def on_voice_state_update(
        self,
        member: discord.Member,
        before: discord.VoiceState,
        after: discord.VoiceState,
    ):
        await self.handle(member, before, after)
