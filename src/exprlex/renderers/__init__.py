"""Token renderers for exprlex."""

from exprlex.renderers.dump import DEFAULT_WIDTH, DumpRenderer, render_dump

__all__ = ["DEFAULT_WIDTH", "DumpRenderer", "render_dump"]
