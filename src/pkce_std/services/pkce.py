"""PKCE (Proof Key for Code Exchange) manager for OAuth 2.1 clients.

Implements RFC 7636 PKCE parameter generation and verification to prevent
authorization code interception attacks. Request building and the OAuth flow
itself belong to the caller; this manager only hands out validated values.
"""

from __future__ import annotations

import logging

from pkce_std.models.challenge import Challenge
from pkce_std.models.code import Code
from pkce_std.models.method import Method
from pkce_std.models.parameters import PKCEConfig, PKCEParameters
from pkce_std.models.verifier import Verifier

logger = logging.getLogger(__name__)


class PKCEManager:
    """Manages PKCE parameter generation and verification.

    This implementation follows RFC 7636 requirements:
    - Uses the S256 code challenge method unless configured otherwise
    - Generates cryptographically secure code verifiers
    - Compares challenges in constant time
    """

    def __init__(self, config: PKCEConfig | None = None):
        """Initialize the PKCE manager.

        Args:
            config: Generation settings, defaults to S256 with 86 characters
        """
        self.config = config or PKCEConfig()

    def generate_code(self) -> Code:
        """Generate a new verifier and challenge pair.

        Returns:
            Code: Coupled verifier and challenge
        """
        method = self.config.challenge_method()
        count = self.config.byte_count()

        if count is not None:
            logger.debug(
                f"Generating PKCE code from {count} random bytes (method={method})"
            )
            return Code.generate_from_bytes(method, count)

        length = self.config.verifier_length()
        logger.debug(f"Generating PKCE code of length {length} (method={method})")
        return Code.generate(method, length)

    def generate_parameters(self) -> PKCEParameters:
        """Generate new PKCE parameters for an authorization flow.

        Returns:
            PKCEParameters: Immutable parameters for the authorization flow
        """
        return PKCEParameters.from_code(self.generate_code())

    def verify(
        self,
        code_verifier: str,
        code_challenge: str,
        code_challenge_method: str = Method.SHA256.token,
    ) -> bool:
        """Check a verifier against a previously issued challenge.

        Args:
            code_verifier: Verifier revealed in the token request
            code_challenge: Challenge stored from the authorization request
            code_challenge_method: Method token stored alongside the challenge

        Returns:
            True if the verifier produces the challenge

        Raises:
            VerifierError: If the verifier is malformed
            UnknownMethodError: If the method token is not recognized
            ChallengeError: If the challenge is malformed for its method
        """
        verifier = Verifier(code_verifier)
        challenge = Challenge.parse(code_challenge, code_challenge_method)

        matches = verifier.verify(challenge)
        if not matches:
            logger.debug(
                f"PKCE verification failed (method={challenge.method()})"
            )
        return matches
