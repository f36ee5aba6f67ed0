"""Building blocks for Kubernetes operators: conditions, affinity, annotations and inventories."""

__version__ = "0.1.0"