"""Examples module: collect, read, and render example programs."""

from docsync_engine.examples.collector import collect, collect_examples, discover_examples, read_example
from docsync_engine.examples.renderer import RenderedBlock, render, render_all

__all__ = [
    "collect",
    "collect_examples",
    "discover_examples",
    "read_example",
    "RenderedBlock",
    "render",
    "render_all",
]
