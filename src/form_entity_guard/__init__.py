"""Static analysis: forbid binding Doctrine entities as Symfony form data classes."""

__version__ = "0.1.0"
