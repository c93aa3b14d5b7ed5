"""
Infrastructure Layer - External Services

Contains:
- cache: Caching decorator for breed lookups
- sources: Remote (dog.ceo) and local breed fetchers
"""
