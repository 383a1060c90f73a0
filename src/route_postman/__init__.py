"""Export a web application's API routes as a Postman collection."""

__version__ = "0.1.0"
