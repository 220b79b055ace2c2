"""Generate AI images straight into the local assets folder."""
