"""Helpers for the command-line entry point."""
