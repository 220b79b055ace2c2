"""Roblox Open Cloud MessagingService tool."""
