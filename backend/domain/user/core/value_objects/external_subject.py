"""ExternalSubject value object."""

from dataclasses import dataclass


MAX_SUBJECT_LENGTH = 255


@dataclass(frozen=True)
class ExternalSubject:
    """Subject identifier issued by the identity provider (``sub`` claim).

    Join key between a verified token and the local user record. The
    format is provider-specific (``user_2abc...``, ``auth0|123``), so only
    emptiness, surrounding whitespace and length are checked.

    Examples:
        >>> ExternalSubject("user_2NNEqL2nrIRdJ194ndJqAHwEfxC").value
        'user_2NNEqL2nrIRdJ194ndJqAHwEfxC'

    Raises:
        ValueError: If the value is empty, padded or too long
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("External subject cannot be empty")

        if self.value != self.value.strip():
            raise ValueError(
                f"External subject must not have surrounding whitespace: {self.value!r}"
            )

        if len(self.value) > MAX_SUBJECT_LENGTH:
            raise ValueError(
                f"External subject too long ({len(self.value)} chars). "
                f"Maximum {MAX_SUBJECT_LENGTH} characters allowed"
            )

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ExternalSubject('{self.value}')"
