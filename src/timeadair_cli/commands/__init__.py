"""Command layer for Tìmeadair CLI."""
