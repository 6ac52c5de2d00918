"""
Pydantic configuration model for a token pair rate.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.models.rate_descriptor import RateDescriptor


class PairRateConfig(BaseModel):
    """Configuration describing one direction of a token pair.

    Only shape and sign are checked here; precision and rate limits are
    enforced by RateDescriptor so its error types surface unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    input_token: str = Field(..., min_length=1, description="Input token label")
    output_token: str = Field(..., min_length=1, description="Output token label")
    rate_in: int = Field(..., gt=0, description="Input side of the rate ratio")
    rate_out: int = Field(..., gt=0, description="Output side of the rate ratio")
    decimals_in: int = Field(default=18, ge=0, description="Input token decimals")
    decimals_out: int = Field(default=18, ge=0, description="Output token decimals")

    @field_validator("input_token", "output_token")
    @classmethod
    def validate_token_label(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank labels."""
        label = v.strip()
        if not label:
            raise ValueError("token label must not be blank")
        return label

    def to_descriptor(self) -> RateDescriptor:
        """Build the validated RateDescriptor for this configuration."""
        return RateDescriptor.create(
            token_pair=(self.input_token, self.output_token),
            rate=(self.rate_in, self.rate_out),
            decimals=(self.decimals_in, self.decimals_out),
        )

    @classmethod
    def from_descriptor(cls, descriptor: RateDescriptor) -> "PairRateConfig":
        """Create a configuration from an existing descriptor."""
        return cls(**descriptor.to_dict())

    @classmethod
    def from_json_file(cls, path: str | Path) -> "PairRateConfig":
        """Load a configuration from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the content is malformed
        """
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))
