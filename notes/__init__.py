"""Note events, pitch mapping and scores."""
