"""Event-driven AI agents: events, configuration, actions, services, tools and plugins."""

__version__ = "0.1.0"