"""Resource budget audit: network usage per resource type against budgets."""

__version__ = "0.1.0"
