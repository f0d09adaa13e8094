"Command line client for the Canvas LMS"

__version__ = "0.1.0"
