"""Generate-and-upload pipeline: AI image to Roblox asset in one call."""
