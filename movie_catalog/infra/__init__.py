"""Infrastructure adapters: database, logging, auth, storage, email."""
