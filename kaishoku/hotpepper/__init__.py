"""
Directory Search API integration layer.

Responsibilities:
- Hold the Hot Pepper Gourmet endpoint configuration and API key.
- Translate search criteria into the upstream query parameters.
- Fetch shop records and surface upstream failures as ``DirectorySearchError``.
"""
