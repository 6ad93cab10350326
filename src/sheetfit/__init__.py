"""Count how many identical pieces can be cut from one rectangular sheet."""
