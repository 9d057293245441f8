def truncate_unit(unit: bytes, limit: int) -> bytes:
    """Keep the first `limit` bytes of a unit."""
    return unit[:limit]
