"""Shopping cart service: in-memory carts behind logging and customer validation."""
