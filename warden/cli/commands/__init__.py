"""Warden CLI commands."""
