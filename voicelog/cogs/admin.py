from __future__ import annotations

import logging

import discord
from discord.ext import commands

from voicelog.core.duration import format_duration
from voicelog.core.timecore import now_utc_ms

log = logging.getLogger(__name__)

MAX_LISTED_SESSIONS = 25


def _short_err(e: Exception) -> str:
    return f"{type(e).__name__}: {e}"


class AdminCog(commands.Cog):
    """
    Admin-only commands for checking on the voice logger.
    Read-only: nothing here touches the session registry.
    """

    def __init__(self, bot: commands.Bot, settings=None, registry=None, clock=now_utc_ms):
        self.bot = bot
        self.settings = settings if settings is not None else getattr(bot, "settings", None)
        self.registry = registry if registry is not None else getattr(bot, "registry", None)
        self.clock = clock

    async def _fail(self, ctx: commands.Context, e: Exception):
        log.exception("admin command failed: %s", _short_err(e))
        try:
            await ctx.reply(f"❌ `{_short_err(e)}`")
        except discord.HTTPException:
            pass

    @commands.command(name="ping")
    @commands.guild_only()
    @commands.has_permissions(administrator=True)
    async def ping(self, ctx: commands.Context):
        try:
            await ctx.reply(f"🏓 pong ({round(self.bot.latency * 1000)}ms)")
        except Exception as e:
            await self._fail(ctx, e)

    @commands.command(name="loaded")
    @commands.guild_only()
    @commands.has_permissions(administrator=True)
    async def loaded(self, ctx: commands.Context):
        try:
            cogs = ", ".join(self.bot.cogs.keys()) or "none"
            cmds = ", ".join(sorted([c.name for c in self.bot.commands]))
            await ctx.reply(f"**Cogs:** {cogs}\n**Commands:** {cmds}")
        except Exception as e:
            await self._fail(ctx, e)

    def sessions_embed(self, guild_id: int) -> discord.Embed:
        """Open sessions started in this guild only."""
        now_ms = self.clock()
        open_sessions = sorted(self.registry.items(guild_id), key=lambda kv: kv[1])

        embed = discord.Embed(title="🎙️ Open voice sessions")
        if not open_sessions:
            embed.description = "No open voice sessions."
            return embed

        lines = [
            f"<@{uid}> — {format_duration(now_ms - joined_at)}"
            for uid, joined_at in open_sessions[:MAX_LISTED_SESSIONS]
        ]
        if len(open_sessions) > MAX_LISTED_SESSIONS:
            lines.append(f"…and {len(open_sessions) - MAX_LISTED_SESSIONS} more")
        embed.description = "\n".join(lines)
        embed.set_footer(text=f"{len(open_sessions)} open")
        return embed

    @commands.command(name="sessions")
    @commands.guild_only()
    @commands.has_permissions(administrator=True)
    async def sessions(self, ctx: commands.Context):
        try:
            await ctx.reply(embed=self.sessions_embed(ctx.guild.id))
        except Exception as e:
            await self._fail(ctx, e)
