"""A module that fails on import, like an app whose settings are missing."""

raise RuntimeError("settings not configured")
