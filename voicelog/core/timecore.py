from datetime import datetime, timezone


def now_utc_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def ms_to_datetime(ms: int) -> datetime:
    return datetime.fromtimestamp(ms // 1000, tz=timezone.utc)
