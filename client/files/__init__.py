"""
File transfer module for client-side file operations.

Handles:
- File selection
- File uploads to the MeTube server
- Upload progress tracking
"""
