"""
Core Layer
- Purpose: Encapsulate the application's domain models and use cases
- Key Directories:
    - entities
    - exceptions
    - interface
    - usecase
"""
