"""Token construction and parsing for the 16-byte OTP block."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from yubiotp.protocol.constants import (
    CAPSLOCK_FLAG,
    COUNTER_MASK,
    CRC_OFFSET,
    IDENTIFIER_LEN,
    TOKEN_LEN,
    TOKEN_STRUCT,
)
from yubiotp.protocol.crc import calculate_crc16, verify_crc16
from yubiotp.protocol.exceptions import MalformedInput


class Token(BaseModel):
    """
    Represents the plaintext token carried inside an OTP.

    Layout (little-endian, 16 bytes):
    [IDENTIFIER x6][CTR_L][CTR_H][TSTP_L x2][TSTP_H][USE][RND x2][CRC x2]

    Attributes:
        identifier: Private device identifier (6 bytes)
        counter: Non-volatile usage counter (16-bit, bit 15 is the capslock flag)
        timestamp_low: Low word of the 24-bit timer
        timestamp_high: High byte of the 24-bit timer
        session_use: Per power-up session counter (8-bit)
        random: Device-generated random padding (16-bit)
        crc: Stored CRC-16 (ones' complement over the first 14 bytes)
    """

    identifier: bytes = Field(
        ..., min_length=IDENTIFIER_LEN, max_length=IDENTIFIER_LEN, description="Private device identifier"
    )
    counter: int = Field(..., ge=0, le=0xFFFF, description="Usage counter")
    timestamp_low: int = Field(..., ge=0, le=0xFFFF, description="Timer low word")
    timestamp_high: int = Field(..., ge=0, le=0xFF, description="Timer high byte")
    session_use: int = Field(..., ge=0, le=0xFF, description="Session usage counter")
    random: int = Field(..., ge=0, le=0xFFFF, description="Random padding")
    crc: int = Field(..., ge=0, le=0xFFFF, description="Stored CRC-16")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_fields(
        cls,
        identifier: bytes,
        counter: int,
        timestamp_low: int,
        timestamp_high: int,
        session_use: int,
        random: int,
    ) -> "Token":
        """
        Build a token from field values, computing its CRC.

        Args:
            identifier: 6-byte private identifier
            counter: Usage counter (0-65535)
            timestamp_low: Timer low word (0-65535)
            timestamp_high: Timer high byte (0-255)
            session_use: Session counter (0-255)
            random: Random padding (0-65535)

        Returns:
            Token with crc filled in

        Raises:
            MalformedInput: If any field does not fit its width

        Example:
            >>> token = Token.from_fields(bytes.fromhex("8792ebfe26cc"), 19, 49712, 0, 17, 40904)
            >>> token.crc
            51235
        """
        try:
            token = cls(
                identifier=identifier,
                counter=counter,
                timestamp_low=timestamp_low,
                timestamp_high=timestamp_high,
                session_use=session_use,
                random=random,
                crc=0,
            )
        except ValidationError as e:
            raise MalformedInput(f"Invalid token fields: {e}") from e

        crc = ~calculate_crc16(token.to_bytes()[:CRC_OFFSET]) & 0xFFFF
        return token.model_copy(update={"crc": crc})

    @classmethod
    def from_bytes(cls, data: bytes) -> "Token":
        """
        Parse a token from its 16-byte plaintext layout.

        The CRC is carried over as stored and not verified here.

        Args:
            data: Raw 16-byte token

        Returns:
            Parsed Token

        Raises:
            MalformedInput: If data is not exactly 16 bytes
        """
        if len(data) != TOKEN_LEN:
            raise MalformedInput(f"Token must be {TOKEN_LEN} bytes, got {len(data)}")

        identifier, counter, tstp_low, tstp_high, use, rnd, crc = TOKEN_STRUCT.unpack(bytes(data))

        return cls(
            identifier=identifier,
            counter=counter,
            timestamp_low=tstp_low,
            timestamp_high=tstp_high,
            session_use=use,
            random=rnd,
            crc=crc,
        )

    def to_bytes(self) -> bytes:
        """Serialize the token to its 16-byte layout."""
        return TOKEN_STRUCT.pack(
            self.identifier,
            self.counter,
            self.timestamp_low,
            self.timestamp_high,
            self.session_use,
            self.random,
            self.crc,
        )

    @property
    def counter_value(self) -> int:
        """Usage counter with the capslock flag bit masked off."""
        return self.counter & COUNTER_MASK

    @property
    def capslock(self) -> bool:
        """True if the capslock flag (bit 15 of the counter) is set."""
        return bool(self.counter & CAPSLOCK_FLAG)

    @property
    def timestamp(self) -> int:
        """24-bit timer value."""
        return (self.timestamp_high << 16) | self.timestamp_low

    def crc16(self) -> int:
        """CRC-16 over the full serialized token; 0xF0B8 when the stored CRC is valid."""
        return calculate_crc16(self.to_bytes())

    @property
    def crc_ok(self) -> bool:
        return verify_crc16(self.to_bytes())

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Token(id={self.identifier.hex()}, ctr={self.counter_value}, use={self.session_use}, "
            f"tstp=0x{self.timestamp:06X}, capslock={self.capslock}, crc=0x{self.crc:04X})"
        )
