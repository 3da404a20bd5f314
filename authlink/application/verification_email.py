"""Verification email content (link format and HTML body)."""

from uuid import UUID

VERIFICATION_EMAIL_TEMPLATE = """
<p>Verify your email address to complete the signup and login into your account.</p>
<p>This link <b>expires in {expires_in}</b>.</p>
<p>Press <a href="{url}">here</a> to proceed.</p>
"""


def build_verification_url(base_url: str, user_id: UUID, token: str) -> str:
    """Build `{base_url}/user/{user_id}/verify/{token}`."""
    return f"{base_url.rstrip('/')}/user/{user_id}/verify/{token}"


def build_verification_email(url: str, ttl_minutes: int = 60) -> str:
    """Render the HTML body for a verification link.

    Args:
        url: Verification link.
        ttl_minutes: Token lifetime shown to the user.

    Returns:
        HTML body.
    """
    if ttl_minutes % 60 == 0:
        hours = ttl_minutes // 60
        expires_in = f"{hours} hour" if hours == 1 else f"{hours} hours"
    else:
        expires_in = f"{ttl_minutes} minutes"
    return VERIFICATION_EMAIL_TEMPLATE.format(url=url, expires_in=expires_in)
