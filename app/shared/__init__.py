"""
Shared module package.

Contains cross-cutting concerns used by the users context:
- Error handling and mapping to the response envelope
- Security middleware
- Rate limiting
- Logging configuration
"""
