"""Services bound to a client's shared state."""
