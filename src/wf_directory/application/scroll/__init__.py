"""Application scroll – mirrored horizontal scrolling for wide tables."""
from wf_directory.application.scroll.bridge import (
    ContentMeasure,
    ResizeSource,
    ScrollSurface,
    SyncedScrollBridge,
    WidthTarget,
)

__all__ = ["ContentMeasure", "ResizeSource", "ScrollSurface", "SyncedScrollBridge", "WidthTarget"]
