"""Breach checker."""
