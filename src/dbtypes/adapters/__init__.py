"""Integrations with database access layers."""
