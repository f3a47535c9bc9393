"""Core utilities shared across the ccauth package."""
