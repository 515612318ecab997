"""Adapters – Query Service implementations."""
