"""Core building blocks shared by every gateway layer."""
