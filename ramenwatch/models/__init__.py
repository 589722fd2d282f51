"""Data models for RamenWatch."""
