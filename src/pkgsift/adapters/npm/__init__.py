"""npms.io adapter."""
