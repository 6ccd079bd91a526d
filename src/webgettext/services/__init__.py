"""Service layer: the binder, the facade and the language selector."""
