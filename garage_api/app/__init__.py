"""
Application package initializer.

The project is organised into layers: ``schemas`` (validation and
record models), ``services`` (business rules), ``core`` (settings,
logging, storage) and ``api`` (HTTP routers).
"""
