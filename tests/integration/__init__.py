"""
Integration tests for the Sentiment Analysis API.

Exercise the full FastAPI application with TestClient: routing, request
validation, error mapping and the real CompletionClient talking to a
fake provider through httpx.MockTransport.
"""
