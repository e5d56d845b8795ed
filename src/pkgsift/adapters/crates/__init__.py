"""crates.io adapter."""
