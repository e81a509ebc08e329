"""Application layer - Use cases and orchestration.

Turns data fetched through the conference API port into view data for the
page handlers that call into this package.

Structure:
- services/: Pure view-data builders (agenda grouping, abstract markup)
"""
