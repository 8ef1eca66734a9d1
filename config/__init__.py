"""Relay configuration (environment-driven Settings)."""
