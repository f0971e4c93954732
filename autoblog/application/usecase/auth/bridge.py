"""Response shared by the Naver login and signup use cases."""

from pydantic import BaseModel


class IdentityBridgeResponse(BaseModel):
    """Credential handed back to the browser after a Naver round trip.

    The browser redeems ``credential`` at ``/auth/exchange``.
    """

    credential: str
    identity_key: str
    email: str
    display_name: str
    is_registered: bool
