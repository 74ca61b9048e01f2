"""Collection manager print detail service."""
