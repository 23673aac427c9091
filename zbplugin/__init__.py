"""Chat bot plugin toolkit: reply logic, moderation stores, subscriptions and configuration."""

__version__ = "1.6.1"