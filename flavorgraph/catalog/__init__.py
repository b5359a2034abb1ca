"""
Recipe catalog package.

Responsibilities:
- Load recipes and ingredient categories from CSV files or in-memory records.
- Normalise raw rows into the canonical Recipe schema.
- Keep serving the last good catalog when a reload fails.
"""
