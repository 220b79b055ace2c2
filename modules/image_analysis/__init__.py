"""Image analysis (vision) tool."""
