"""Domain layer - error taxonomy shared by every pattern example."""
