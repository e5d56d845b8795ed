"""Core search orchestration."""
