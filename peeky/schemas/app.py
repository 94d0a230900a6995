"""Application info schemas."""

from pydantic import BaseModel


class AppInfo(BaseModel):
    """Static application metadata reported to the GUI shell."""

    name: str
    version: str
    description: str
    window_labels: dict[str, str]
    shortcuts: dict[str, str]
