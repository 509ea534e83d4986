"""User accounts with saved locations and a metric/imperial preference"""

__version__ = "1.0.0"
