import hashlib
import hmac

from util.functions import strip_prefix

SIGNATURE_HEADER = "X-Hub-Signature-256"
SIGNATURE_PREFIX = "sha256="


def compute_signature(body: bytes, app_secret: str) -> str:
    return hmac.new(app_secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def verify_signature(body: bytes, signature_header: str | None, app_secret: str) -> bool:
    """
    Checks the 'X-Hub-Signature-256' header against the HMAC-SHA256 of the raw body.
    https://developers.facebook.com/docs/graph-api/webhooks/getting-started#validate-payloads
    """
    if not app_secret or not signature_header:
        return False
    received = strip_prefix(signature_header.strip(), SIGNATURE_PREFIX)
    expected = compute_signature(body, app_secret)
    return hmac.compare_digest(expected.encode("utf-8"), received.encode("utf-8"))


def verify_token(received: str | None, expected: str) -> bool:
    if not expected or received is None:
        return False
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))
