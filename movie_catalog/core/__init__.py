"""Framework-level building blocks shared by all features."""
