"""Tool definitions and descriptions for useradd MCP."""

LIST_USERS_DESC = """List the user accounts on the system.

Reads the passwd and group databases and reports every account with the
supplementary groups it belongs to, together with the full group listing.
When a username is given only that account is returned and the group
listing is left out.

Example:
- List all users: ListUsers()
- Look up one user: ListUsers(username="alice")

Accounts whose primary GID is below 1000 are flagged as system users."""

ADD_USER_DESC = """Add a new user account to the system.

Runs useradd with one flag per supplied option. The result reports whether
useradd succeeded and carries its output as the message, so a failed
creation still returns normally with success=false.

Example:
- AddUser(username="bob")
- AddUser(username="bob", create_home=True, uid=5001, shell="/bin/bash")"""

HEALTH_DESC = """Health check for the useradd MCP server.

Reports whether the getent and useradd utilities can be found."""

GET_SCHEMA_INFO_DESC = """Get schema information for all available tools."""
