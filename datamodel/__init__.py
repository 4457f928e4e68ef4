"""Product and todo-user data models."""
