"""Factories for interface implementations."""
