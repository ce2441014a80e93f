"""Users bounded context: validation, update planning and batch deletion rules."""
