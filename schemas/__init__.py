"""schemas package - pydantic contracts for transform outcomes and batch reports."""
