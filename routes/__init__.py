"""Flask blueprints: HTML page, JSON API and health checks."""
