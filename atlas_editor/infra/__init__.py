"""App infrastructure: env files, app-data paths and logging."""
