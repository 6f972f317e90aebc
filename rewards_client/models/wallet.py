import base64
import binascii

from pydantic import BaseModel, ConfigDict, field_validator


class RewardsWallet(BaseModel):
    """Snapshot of the user's rewards wallet identity.

    recovery_seed accepts raw bytes or base64 text (the on-disk format).
    """
    model_config = ConfigDict(frozen=True)

    payment_id: str
    recovery_seed: bytes

    @field_validator("recovery_seed", mode="before")
    @classmethod
    def _decode_seed(cls, value):
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except (binascii.Error, ValueError) as e:
                raise ValueError(f"recovery_seed is not valid base64: {e}")
        return value

    def __repr__(self) -> str:
        return f"RewardsWallet(payment_id={self.payment_id!r})"
