"""Roblox Open Cloud Engine (instance) tools."""
