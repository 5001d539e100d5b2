"""Shared utilities and helpers for dataforseo-cli."""
