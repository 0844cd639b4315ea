"""Issue and comment search provider for the monitor issue tracker."""

__version__ = "1.0.0"
