"""Farm stand product catalog."""
