"""Docker Hub adapter."""
