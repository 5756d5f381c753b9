"""Framework-level routes: service info and health checks."""
