"""Warden command-line interface."""
