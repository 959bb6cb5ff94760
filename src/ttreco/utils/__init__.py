"""Shared utilities: logging, class factories, constants and enumerations."""
