"""Terminal widgets drawn into cell buffers: a scroll view and text prompts."""

__version__ = "0.1.0"