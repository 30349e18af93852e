"""Natural language reminders for the Coach Kai assistant."""

__version__ = "0.1.0"
