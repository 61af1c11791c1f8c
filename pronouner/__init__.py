"""Pronouner command line."""
