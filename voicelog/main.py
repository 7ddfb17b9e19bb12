# voicelog/main.py
import asyncio
import logging
import sys

import discord
from discord.ext import commands

from voicelog.config import ConfigError, load_settings
from voicelog.core.sessions import SessionRegistry
from voicelog.loader import load_all


def build_bot(settings) -> commands.Bot:
    # guilds + voice_states are enough for voice logging; no privileged intents
    intents = discord.Intents.default()
    intents.voice_states = True
    intents.members = False
    intents.message_content = settings.message_content

    prefix = commands.when_mentioned_or(settings.command_prefix)
    return commands.Bot(command_prefix=prefix, intents=intents)


async def run(settings):
    bot = build_bot(settings)

    # process-wide, starts empty, dropped on shutdown
    registry = SessionRegistry()

    @bot.event
    async def setup_hook():
        await load_all(bot, settings, registry)
        print("[VoiceLog] setup_hook: cogs loaded ✅")

    @bot.event
    async def on_ready():
        print(
            f"[VoiceLog] ✅ ONLINE as {bot.user} | guilds={len(bot.guilds)} "
            f"| log_channel={settings.log_channel_id} | embeds={settings.log_embeds}"
        )
        if not settings.message_content:
            print(
                f"[VoiceLog] message_content intent off: use @{bot.user} <command> "
                "for admin commands (set VOICELOG_MESSAGE_CONTENT=true to use the prefix)"
            )

    async with bot:
        await bot.start(settings.token)


def main():
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"❌  {exc}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        print("[VoiceLog] shutting down")


if __name__ == "__main__":
    main()
