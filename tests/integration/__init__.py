"""
Integration tests for the Text Moderation Gateway.

Test the FastAPI application end to end with FastAPI TestClient and a
stubbed inference service (no network access required).
"""
