"""
Summary: Probe, extraction and facade use cases for audio metadata.
Why: Keep decoding strategy and field rules behind stable import paths.
"""
