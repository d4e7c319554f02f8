"""Watch the clipboard and answer whatever gets copied."""

__version__ = "0.1.0"
