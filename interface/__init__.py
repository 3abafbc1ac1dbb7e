"""
Interface Layer
- Translates HTTP requests to use case calls
- Handles request decoding, routing and error rendering
"""
