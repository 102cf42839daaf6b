from .blocks import parse_blocks

__all__ = ["parse_blocks"]
