"""Shared utilities: errors, logging and the Actions runtime."""
