"""gram - diff GitHub repository settings against a settings file."""

__version__ = "0.1.0"
