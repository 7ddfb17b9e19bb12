# voicelog/ui/formatting.py
import discord
from discord.utils import format_dt

from voicelog.config import JOIN_COLOR, LEAVE_COLOR
from voicelog.core.timecore import ms_to_datetime


def abs_time(ms: int) -> str:
    return format_dt(ms_to_datetime(ms), style="t")


def rel_time(ms: int) -> str:
    return format_dt(ms_to_datetime(ms), style="R")


def _avatar_url(member) -> str | None:
    avatar = getattr(member, "display_avatar", None)
    return getattr(avatar, "url", None)


def join_embed(member: discord.Member, channel_id: int, at_ms: int) -> discord.Embed:
    embed = discord.Embed(
        description=(
            f"📥 **Channel:** <#{channel_id}>\n\n"
            f"⏰ Joined: {abs_time(at_ms)} ({rel_time(at_ms)})"
        ),
        color=JOIN_COLOR,
    )
    embed.set_author(name=f"{member.display_name} joined a voice channel", icon_url=_avatar_url(member))
    return embed


def leave_embed(member: discord.Member, at_ms: int, duration: str) -> discord.Embed:
    embed = discord.Embed(
        description=(
            f"📤 **Duration:** {duration}\n\n"
            f"⏰ Left: {abs_time(at_ms)} ({rel_time(at_ms)})"
        ),
        color=LEAVE_COLOR,
    )
    embed.set_author(name=f"{member.display_name} left voice", icon_url=_avatar_url(member))
    return embed


def join_text(member: discord.Member, channel_id: int, at_ms: int) -> str:
    return f"✅ {member.display_name} joined <#{channel_id}> at {abs_time(at_ms)} ({rel_time(at_ms)})"


def leave_text(member: discord.Member, at_ms: int, duration: str) -> str:
    return f"❌ {member.display_name} left voice at {abs_time(at_ms)} | 📊 Duration: {duration}"


# send() kwargs: exactly one of embed= / content=

def render_join(settings, member: discord.Member, channel_id: int, at_ms: int) -> dict:
    if settings.log_embeds:
        return {"embed": join_embed(member, channel_id, at_ms)}
    return {"content": join_text(member, channel_id, at_ms)}


def render_leave(settings, member: discord.Member, at_ms: int, duration: str) -> dict:
    if settings.log_embeds:
        return {"embed": leave_embed(member, at_ms, duration)}
    return {"content": leave_text(member, at_ms, duration)}
