"""Shared helpers for environment handling, files, text and log hygiene."""
