"""
Interfaces layer package.

Contains FastAPI routers and Pydantic request/response schemas.
No business logic belongs here.
Routes call use cases and wrap results in the response envelope.
"""
