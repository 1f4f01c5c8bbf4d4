"""Binary trees of integers: building, traversal, measurement, display and examples."""

__version__ = "0.1.0"
__all__ = ["node", "display", "demo"]