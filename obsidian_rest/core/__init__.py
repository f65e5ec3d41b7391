"""Request building, response validation and vault orchestration."""
