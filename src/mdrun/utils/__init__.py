"""Shared helpers for mdrun."""
