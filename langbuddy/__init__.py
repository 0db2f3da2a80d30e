"""Language Learning Buddy backend package."""
