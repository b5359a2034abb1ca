"""
FlavorGraph recipe recommendation service.

Recommends recipes from the ingredients a user has on hand, using an
ingredient co-occurrence graph, greedy pantry allocation and curated
substitutions.
"""
