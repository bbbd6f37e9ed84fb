"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
The palindrome classifier and configuration live in ``core``, storage
backends in ``store``, business logic in ``services`` and HTTP routes
under ``api/<version>/``.  The ASGI application itself is
``palindrome_api.app.main:app``; it is not imported here because
building it reads the environment.
"""
