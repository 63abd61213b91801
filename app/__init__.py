"""
Portfolio API
Backend for a personal portfolio site and its admin dashboard.

Architecture:
- MongoDB: page content, projects, visitor messages/feedback, CV records, admins
- Local disk (public/): uploaded images and the CV file
- JWT: admin-only write access
"""

__version__ = "1.0.0"
