"""
Career Code - job board backend.

HR users post jobs, applicants submit applications, and both sides
query status. Data endpoints sit behind an identity-verification gate:
- Session strategy: self-issued JWT carried in an HTTP-only cookie
- Firebase strategy: ID token verified by firebase-admin
"""

__version__ = "1.0.0"
