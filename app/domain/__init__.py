"""
Domain layer package.

Contains pure business logic: entities, validation rules, domain
services and port interfaces. No framework imports and no direct IO;
storage is reached only through ports.
"""
