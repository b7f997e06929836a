class DIContainer:
    """Simple dependency injection container keyed by interface/service name."""

    _instance = None

    def __init__(self):
        self._dependencies = {}

    @classmethod
    def get_instance(cls):
        """Singleton pattern to get the container instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, key, implementation):
        """Register an instance, a class, or a factory taking the container."""
        self._dependencies[key] = implementation

    def resolve(self, key):
        """Resolve an implementation for a key."""
        if key not in self._dependencies:
            raise KeyError(f"No implementation registered for {key}")

        implementation = self._dependencies[key]

        # Factory function that requires the container
        if callable(implementation) and not isinstance(implementation, type):
            return implementation(self)

        # Registered class: instantiate it
        elif isinstance(implementation, type):
            return implementation()

        return implementation
