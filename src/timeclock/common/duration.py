def format_duration(ms: int) -> str:
    """Render a millisecond interval as "Xh Ym" or "Y minutes".

    Strictly floor-based: 3_599_999 is "59 minutes", never "1h 0m".
    Negative intervals keep their sign, e.g. -3_900_000 is "-1h 5m".
    """
    if ms < 0:
        return "-" + format_duration(-ms)

    total_seconds = int(ms) // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes} minutes"
