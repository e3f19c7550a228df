"""FastAPI dependencies of the IAM bounded context."""
