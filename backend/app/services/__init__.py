"""Services — data-access operations behind the counter routes."""
