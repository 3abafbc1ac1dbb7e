"""
Infrastructure Layer
- Purpose: Provide concrete implementations of the core interfaces
- Key Directories:
    - repositories
    - di
"""
