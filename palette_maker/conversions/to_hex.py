def rgb_to_hex(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels as ``r << 16 | g << 8 | b``."""
    return (r << 16) | (g << 8) | b
