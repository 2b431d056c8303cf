"""Application services orchestrating stores, hashing and token signing."""
