"""
Use Cases

Organized into domain folders:
- businesses/: Business lifecycle and permission lookup
- members/: Team membership management
- invitations/: Invitation lifecycle
- access_requests/: Requests to join a business
- audit/: Audit logs
"""
