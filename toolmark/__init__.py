"""toolmark: live terminal indicators for tool invocations."""

__version__ = "0.1.0"
