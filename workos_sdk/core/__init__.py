"""
Typed HTTP client core

Provides the pieces every WorkOS call goes through:
- Credentials (secret key + base URL)
- Request building from operation descriptors
- Transport invocation with timeout classification
- Response decoding into typed values or classified errors
"""
