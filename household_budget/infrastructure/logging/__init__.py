"""Logging helpers for the household budget application."""
