"""Package containing a class that is both a module and a root endpoint."""
