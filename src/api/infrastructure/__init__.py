"""Infrastructure shared by all bounded contexts: settings, logging, version."""
