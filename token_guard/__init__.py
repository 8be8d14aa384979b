"""
Token Guard: JWT claim validation and revocation storage.

- app.validators: Payload validation (required claims, timestamps, refresh window).
- app.storage: Revocation store contract plus memory and Redis adapters.
- app.support: Claim accessor and time helpers.
- app.factory: Builds validators and stores from settings.

Design notes:
- Signature verification and JWT decoding happen upstream; this package
  receives already-decoded claim mappings.
- Module import must not perform network calls. Redis connections are
  opened lazily on first use.
"""
