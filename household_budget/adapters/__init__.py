"""Adapters package: command-line entry points and the dashboard."""
