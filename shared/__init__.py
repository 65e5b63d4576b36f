"""Shared configuration, domain models and composition policies."""
