"""Roblox thumbnails tool (public API, no auth)."""
