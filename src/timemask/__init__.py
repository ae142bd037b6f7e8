"""timemask — date-format tokenizing, input masks, and duration strings."""

__version__ = "0.3.0"
