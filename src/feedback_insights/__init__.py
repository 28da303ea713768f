"""Consumer feedback submissions and rule-based business insights."""

__version__ = "0.1.0"
