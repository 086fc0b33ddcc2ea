"""Media session value types."""
