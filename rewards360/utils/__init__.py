"""Shared helpers for Rewards360."""
