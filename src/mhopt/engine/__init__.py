"""Search strategies and their configuration."""
