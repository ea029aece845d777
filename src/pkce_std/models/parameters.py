"""Serializable PKCE models.

Contains the parameters persisted alongside an in-flight authorization
request, and the generation settings accepted by ``PKCEManager``. Both load
from plain strings and integers, and validate them exactly as user input is
validated when constructing the typed values.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pkce_std.models.challenge import Challenge
from pkce_std.models.code import Code
from pkce_std.models.length import Count, Length
from pkce_std.models.method import Method
from pkce_std.models.verifier import Verifier


class PKCEParameters(BaseModel):
    """PKCE (Proof Key for Code Exchange) parameters for one authorization flow.

    Immutable once validated. Loading from untrusted storage goes through the
    same checks as ``Verifier`` and ``Method.parse``, and the challenge must
    correspond to the verifier.
    """

    model_config = ConfigDict(frozen=True)

    code_verifier: str = Field(repr=False)
    code_challenge: str
    code_challenge_method: str = Field(default=Method.SHA256.token)

    @field_validator("code_verifier")
    @classmethod
    def validate_verifier(cls, v: str) -> str:
        Verifier.check(v)
        return v

    @field_validator("code_challenge_method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        return Method.parse(v).token

    @model_validator(mode="after")
    def validate_correspondence(self) -> PKCEParameters:
        if not self.verifier().verify(self.challenge()):
            raise ValueError("code_challenge does not match code_verifier")
        return self

    @classmethod
    def from_code(cls, code: Code) -> PKCEParameters:
        verifier, secret, method = code.into_parts()
        return cls(
            code_verifier=verifier,
            code_challenge=secret,
            code_challenge_method=method.token,
        )

    def __repr_args__(self):
        # A plain challenge is the verifier itself
        plain = self.code_challenge_method == Method.PLAIN.token
        for name, value in super().__repr_args__():
            if name == "code_challenge" and plain:
                yield name, "<hidden>"
            else:
                yield name, value

    def verifier(self) -> Verifier:
        return Verifier(self.code_verifier)

    def method(self) -> Method:
        return Method.parse(self.code_challenge_method)

    def challenge(self) -> Challenge:
        return Challenge.parse(self.code_challenge, self.method())

    def into_code(self) -> Code:
        return Code(self.verifier(), self.challenge())

    def authorization_params(self) -> dict[str, str]:
        """Parameters for the authorization request (RFC 7636 Section 4.3)."""
        return self.challenge().to_params()

    def token_params(self) -> dict[str, str]:
        """Parameters for the token request (RFC 7636 Section 4.5)."""
        return {"code_verifier": self.code_verifier}


class PKCEConfig(BaseModel):
    """Settings for generating PKCE codes.

    When ``count`` is set, verifiers are produced by encoding that many
    random bytes and ``length`` is ignored. Fields accept and serialize to
    their plain token and integer forms.
    """

    model_config = ConfigDict(frozen=True)

    method: Method = Method.SHA256
    length: Length = Field(default_factory=Length.default)
    count: Count | None = None
    allow_plain: bool = False

    @field_validator("method", mode="before")
    @classmethod
    def validate_method(cls, v: Method | str) -> Method:
        if isinstance(v, Method):
            return v
        return Method.parse(v)

    @model_validator(mode="after")
    def validate_plain_allowed(self) -> PKCEConfig:
        if self.method is Method.PLAIN and not self.allow_plain:
            raise ValueError(
                "plain method requires allow_plain=True; use S256 where possible"
            )
        return self

    def challenge_method(self) -> Method:
        return self.method

    def verifier_length(self) -> Length:
        return self.length

    def byte_count(self) -> Count | None:
        return self.count
