# voicelog/loader.py
from __future__ import annotations

import traceback

from voicelog.cogs.voice_log import VoiceLogCog
from voicelog.cogs.admin import AdminCog
from voicelog.cogs.errors import ErrorHandlerCog
from voicelog.core.sessions import SessionRegistry


async def load_all(bot, settings, registry=None):
    print("[VoiceLog] Starting loader...")

    if registry is None:
        registry = SessionRegistry()

    # attach shared deps (so any cog can grab them if needed)
    bot.settings = settings
    bot.registry = registry

    # ---------------- VOICE LOG ----------------
    try:
        await bot.add_cog(VoiceLogCog(bot, settings, registry))
        print("[VoiceLog] ✅ VoiceLogCog loaded")
    except Exception:
        print("[VoiceLog] ❌ VoiceLogCog FAILED")
        traceback.print_exc()

    # ---------------- ADMIN ----------------
    try:
        await bot.add_cog(AdminCog(bot, settings=settings, registry=registry))
        print("[VoiceLog] ✅ AdminCog loaded")
    except Exception:
        print("[VoiceLog] ❌ AdminCog FAILED")
        traceback.print_exc()

    # ---------------- ERROR HANDLER ----------------
    try:
        await bot.add_cog(ErrorHandlerCog(bot))
        print("[VoiceLog] ✅ ErrorHandlerCog loaded")
    except Exception:
        print("[VoiceLog] ❌ ErrorHandlerCog FAILED")
        traceback.print_exc()

    print("[VoiceLog] Loaded cogs:", ", ".join(bot.cogs.keys()))
    return registry
