"""
WorkOS API resource wrappers

Stateless functions over the client's execute() callable, grouped by product:
- Directory Sync (directories, users, groups)
- Multi-factor authentication (enroll, challenge, verify)
- Events
- Organizations
- SSO (connections)
- User Management (users, authentication, memberships, invitations)
"""
