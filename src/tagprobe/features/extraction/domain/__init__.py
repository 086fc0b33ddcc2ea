"""Library-neutral model of decoded audio files."""
