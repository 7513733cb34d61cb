"""Cache infrastructure."""
