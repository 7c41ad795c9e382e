"""External API Integrations."""
