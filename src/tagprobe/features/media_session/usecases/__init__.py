"""Media session use cases."""
