"""Feature packages: metadata extraction and the media session surface."""
