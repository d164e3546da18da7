"""Adapters for feeds and output."""
