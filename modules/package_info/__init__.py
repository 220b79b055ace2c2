"""Read-only introspection of the monorepo packages directory."""
