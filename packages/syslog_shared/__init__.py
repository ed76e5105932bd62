"""Shared primitives (errors, logging, configuration) for syslog-fields."""
