"""Submit file command."""
from dataclasses import dataclass


@dataclass(frozen=True)
class SubmitFileCommand:
    """Command to decode an identifier and enqueue its metadata."""
    file_name: str
