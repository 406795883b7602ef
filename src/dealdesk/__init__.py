"""dealdesk - interactive inventory and customer deals console."""

__version__ = "0.1.0"
