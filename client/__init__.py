"""
Client package for the MeTube upload client.

This package contains all client-side functionality including:
- File selection and upload
- Upload progress reporting
- User interface
- Configuration and utilities
"""
