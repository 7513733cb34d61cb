"""Cache core domain."""
