"""Domain entities, their tables and repositories, grouped per resource."""
