from dataclasses import dataclass


@dataclass
class EncoderConfig:
    default_op_type: str = "index"
    ensure_ascii: bool = False
    allow_nan: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.default_op_type, str) or not self.default_op_type:
            raise ValueError(
                "default_op_type must be a non-empty string; it becomes the action line's top-level key"
            )
