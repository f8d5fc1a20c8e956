"""Channel Idea Engine - AI video ideas from a YouTube channel's style and current trends."""

__version__ = "0.1.0"
