"""Ephemeral state demo: a widget that owns its counter."""
