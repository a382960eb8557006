"""
Integration tests for the Entry Analysis Service.

Exercise the FastAPI app end to end through TestClient, with the identity
provider and hosted inference replaced via dependency overrides.
"""
