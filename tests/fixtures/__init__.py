"""Shared fixtures and sample package trees."""
