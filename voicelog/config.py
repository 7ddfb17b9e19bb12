from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv


JOIN_COLOR = 0x57F287   # discord brand green
LEAVE_COLOR = 0xED4245  # discord brand red

_TRUTHY = ("true", "1", "yes", "on")


class ConfigError(RuntimeError):
    pass


def _parse_bool(v: str | None, default: bool) -> bool:
    # unset or empty -> default (LOG_EMBEDS="" keeps embeds on)
    s = (v or "").strip().lower()
    if not s:
        return default
    return s in _TRUTHY


@dataclass(frozen=True)
class Settings:
    token: str
    log_channel_id: int

    # ---------------- Output ----------------
    log_embeds: bool = True          # False -> plain text messages

    # ---------------- Bot / Commands ----------------
    command_prefix: str = "!"
    # privileged intent; off -> admin commands only answer @mentions
    message_content: bool = False

    # ---------------- Logging ----------------
    log_level: str = "INFO"


def load_settings() -> Settings:
    # .env is for local runs; real env vars win
    load_dotenv(override=False)

    token = (
        os.getenv("BOT_TOKEN", "").strip()
        or os.getenv("DISCORD_TOKEN", "").strip()
        or os.getenv("DISCORD_BOT_TOKEN", "").strip()
    )

    problems = []
    if not token:
        problems.append("BOT_TOKEN is not set (fallbacks: DISCORD_TOKEN / DISCORD_BOT_TOKEN)")

    raw_channel = os.getenv("LOG_CHANNEL_ID", "").strip()
    log_channel_id = 0
    if not raw_channel:
        problems.append("LOG_CHANNEL_ID is not set")
    else:
        try:
            log_channel_id = int(raw_channel)
        except ValueError:
            problems.append(f"LOG_CHANNEL_ID must be a channel id, got {raw_channel!r}")
        else:
            if log_channel_id <= 0:
                problems.append(f"LOG_CHANNEL_ID must be a channel id, got {raw_channel!r}")

    if problems:
        raise ConfigError(
            "Missing or invalid configuration:\n"
            + "\n".join(f"  - {p}" for p in problems)
            + "\nSet them in the environment or in a .env file."
        )

    prefix = (os.getenv("VOICELOG_PREFIX") or "").strip() or "!"
    log_level = (os.getenv("VOICELOG_LOG_LEVEL") or "").strip().upper() or "INFO"

    return Settings(
        token=token,
        log_channel_id=log_channel_id,
        log_embeds=_parse_bool(os.getenv("LOG_EMBEDS"), True),
        command_prefix=prefix,
        message_content=_parse_bool(os.getenv("VOICELOG_MESSAGE_CONTENT"), False),
        log_level=log_level,
    )
