"""Test suite for the conference front-end core.

Test structure:
- unit/: Pure logic in isolation (agenda, abstract markup, codec, config)
- integration/: API client against a mocked HTTP transport (pytest-httpx)
"""
