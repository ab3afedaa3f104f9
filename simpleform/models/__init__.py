"""ORM models for the SimpleForm backend."""
