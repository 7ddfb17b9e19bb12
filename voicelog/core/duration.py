def format_duration(ms):
    """
    "less than 1s" under a second (also for None / negative).
    Otherwise "Nh Nm Ns" with zero parts dropped; seconds are only shown
    while the duration is under an hour.
      125000  -> "2m 5s"
      3661000 -> "1h 1m"
    """
    if not ms or ms < 1000:
        return "less than 1s"

    total_seconds = int(ms) // 1000
    h = total_seconds // 3600
    m = (total_seconds % 3600) // 60
    s = total_seconds % 60

    parts = []
    if h:
        parts.append(f"{h}h")
    if m:
        parts.append(f"{m}m")
    if s and not h:
        parts.append(f"{s}s")
    return " ".join(parts)
