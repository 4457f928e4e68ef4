from typing import Dict, List, Optional, Type


class SchemaRegistry:
    """
    Explicit registry mapping model names to mapped classes.

    Each Database owns its own registry, so several independent
    instances can live side by side in one process.
    """

    def __init__(self):
        self._models: Dict[str, Type] = {}

    def register(self, model: Type, name: Optional[str] = None) -> Type:
        """
        Register a mapped class.

        Args:
            model: SQLAlchemy mapped class
            name: Registry key (defaults to the class name)

        Returns:
            The registered class

        Raises:
            ValueError: If the name is already taken by a different class
        """
        key = name or model.__name__
        existing = self._models.get(key)
        if existing is not None and existing is not model:
            raise ValueError(f"Model name '{key}' is already registered")
        self._models[key] = model
        return model

    def get(self, name: str) -> Type:
        """Return the class registered under name; KeyError if unknown."""
        try:
            return self._models[name]
        except KeyError:
            raise KeyError(f"No model registered under '{name}'") from None

    def names(self) -> List[str]:
        return sorted(self._models)

    def __contains__(self, name: str) -> bool:
        return name in self._models

    def __repr__(self):
        return f"<SchemaRegistry(models={self.names()})>"
