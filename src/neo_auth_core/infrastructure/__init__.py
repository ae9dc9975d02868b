"""Infrastructure adapters: bcrypt hashing, JWT signers, reference storage."""
