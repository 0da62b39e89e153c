"""
Shared utilities for the video client.

Common building blocks consumed by every component:

- config: Client configuration via pydantic-settings
- logging: Structured logging with request correlation
- errors: Canonical error types and responses

Do not import from the client, caching or normalization packages here.
"""
