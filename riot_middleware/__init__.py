"""
Pass-through middleware for the Riot Games API.

The middleware is a Flask application that sits between game clients and
the Riot Games API. Requests for accounts and matches are validated,
forwarded upstream with the service's ``X-Riot-Token`` and reshaped into a
uniform JSON envelope. Per-user preferences are kept in the Appwrite
identity service, serialized into a single string field on the user.

The preferences routes require the caller to present the shared secret,
either as ``Authorization: Bearer <secret>`` or ``X-API-Key: <secret>``.
Every other route is open.

Every failure is answered with ``{error, status, message, timestamp}``.
"""
