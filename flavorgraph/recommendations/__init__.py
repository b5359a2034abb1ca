"""
Recipe search service.

Responsibilities:
- Accept the ingredients a user has on hand.
- Normalise them and run the recommendation engine over the current catalog.
- Cache responses per catalog version and record search analytics.
- Return structured results ready for API serialisation.
"""
