"""Domain models for Tìmeadair CLI."""
