"""Platform integrations: logging."""
