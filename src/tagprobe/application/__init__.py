"""Application services composing features with their default adapters."""
