"""Roblox Open Cloud Assets tools."""
