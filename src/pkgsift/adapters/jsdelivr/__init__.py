"""jsDelivr adapter."""
