"""Pytest configuration and shared fixtures."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from voicelog.config import Settings
from voicelog.core.sessions import SessionRegistry

LOG_CHANNEL_ID = 999
VOICE_CHANNEL_ID = 123
GUILD_ID = 1


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now_ms: int = 0):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms


def voice_state(channel_id=None):
    """Minimal stand-in for discord.VoiceState."""
    channel = SimpleNamespace(id=channel_id) if channel_id is not None else None
    return SimpleNamespace(channel=channel)


def http_response(status: int, reason: str):
    return MagicMock(status=status, reason=reason)


@pytest.fixture
def settings():
    return Settings(token="test-token", log_channel_id=LOG_CHANNEL_ID, log_embeds=True)


@pytest.fixture
def plain_settings():
    return Settings(token="test-token", log_channel_id=LOG_CHANNEL_ID, log_embeds=False)


@pytest.fixture
def registry():
    return SessionRegistry()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def log_channel():
    channel = MagicMock(spec=discord.TextChannel)
    channel.id = LOG_CHANNEL_ID
    channel.send = AsyncMock()
    return channel


@pytest.fixture
def bot(log_channel):
    bot = MagicMock()
    bot.get_channel.return_value = log_channel
    bot.fetch_channel = AsyncMock(return_value=log_channel)
    return bot


def make_member(user_id: int = 42, name: str = "milk", is_bot: bool = False, guild_id: int = GUILD_ID):
    member = MagicMock()
    member.id = user_id
    member.guild.id = guild_id
    member.bot = is_bot
    member.display_name = name
    member.display_avatar.url = f"https://cdn.discordapp.com/avatars/{user_id}.png"
    return member


@pytest.fixture
def member():
    return make_member()
