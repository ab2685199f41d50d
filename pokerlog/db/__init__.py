"""Session storage and backup transfer for pokerlog."""
