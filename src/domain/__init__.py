"""Domain layer - Contracts of the conference front-end core.

Pure Python, no framework or infrastructure dependencies.

Structure:
- errors/: Error types returned inside Failure results
- protocols/: Ports implemented by infrastructure adapters
"""
