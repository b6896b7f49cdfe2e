"""Utility helpers for sqltips."""
