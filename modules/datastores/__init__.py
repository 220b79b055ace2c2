"""Roblox Open Cloud DataStore tools."""
