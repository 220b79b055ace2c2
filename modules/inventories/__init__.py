"""Roblox Open Cloud inventory tools."""
